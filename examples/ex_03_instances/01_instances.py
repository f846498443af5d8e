"""Instances: literal components and property injection.

Properties are injected through ``set<Key>`` methods when the instance has
one, and assigned as attributes otherwise. Literal descriptors produce a new
class on every call.
"""

from __future__ import annotations

from typing import Any

from compwire import ClassRuntime, ComponentFactory


def set_adder(self: Any, adder: Any) -> None:
    self.add = adder


def main() -> None:
    factory = ComponentFactory(
        {
            "runtime": ClassRuntime(),
            "components": {"calculator": {"setAdder": set_adder}},
        },
    )

    calculator = factory.create_instance(
        {
            "component": "calculator",
            "properties": {"adder": lambda a, b: a + b + 10, "label": "calc"},
        },
    )
    print(f"add={calculator.add(5, 10)}")  # => add=25
    print(f"label={calculator.label}")  # => label=calc

    literal = {"template": "<b>inline</b>"}
    first = factory.create_instance({"component": literal})
    second = factory.create_instance({"component": literal})
    print(f"literal_classes_shared={type(first) is type(second)}")  # => literal_classes_shared=False

    print(f"malformed={factory.create_instance({'component': None})}")  # => malformed=None


if __name__ == "__main__":
    main()
