"""Circular components: self references and cycles between names.

A shell class is cached before its children are resolved, so a child that
points back at a name under construction gets that same class.
"""

from __future__ import annotations

from compwire import ClassRuntime, ComponentFactory


def main() -> None:
    factory = ComponentFactory(
        {
            "runtime": ClassRuntime(),
            "components": {
                "tree": {"template": "<ul/>", "components": {"node": "self"}},
                "folder": {"components": {"entry": "file"}},
                "file": {"components": {"parent": "folder"}},
            },
        },
    )

    Tree = factory.get_component_class("tree")
    print(f"tree_self={Tree.components['node'] is Tree}")  # => tree_self=True

    Folder = factory.get_component_class("folder")
    File = factory.get_component_class("file")
    print(f"folder_to_file={Folder.components['entry'] is File}")  # => folder_to_file=True
    print(f"file_to_folder={File.components['parent'] is Folder}")  # => file_to_folder=True


if __name__ == "__main__":
    main()
