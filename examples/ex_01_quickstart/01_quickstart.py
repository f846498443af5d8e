"""Quickstart: register descriptors, resolve classes, create an instance.

Descriptors are plain mappings. The factory turns them into classes with the
configured runtime and hands out the same class for a name every time.
"""

from __future__ import annotations

from compwire import ClassRuntime, ComponentFactory


def main() -> None:
    factory = ComponentFactory(
        {
            "runtime": ClassRuntime(),
            "components": {
                "greeting": {"template": "<h4>Hello {{name}}</h4>"},
            },
        },
    )

    Greeting = factory.get_component_class("greeting")
    print(f"template={Greeting.template}")  # => template=<h4>Hello {{name}}</h4>
    print(f"same_class={Greeting is factory.get_component_class('greeting')}")  # => same_class=True

    greeting = factory.create_instance(
        {"component": "greeting", "options": {"data": {"name": "San"}}},
    )
    print(f"data={greeting.data}")  # => data={'name': 'San'}


if __name__ == "__main__":
    main()
