from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def setter_name(key: str) -> str:
    """Return the setter method name for a property key.

    Examples:
        .. code-block:: python

            assert setter_name("adder") == "setAdder"

    """
    return f"set{key[:1].upper()}{key[1:]}"


class PropertyInjector:
    """Apply properties to a component instance, preferring setter methods.

    For each key a callable ``set<Key>`` member on the instance is invoked with
    the value. Without such a member the value is assigned as an attribute.
    Keys whose value is ``None`` are skipped so existing members are never
    overwritten with nothing.
    """

    def inject(self, instance: Any, properties: Mapping[str, Any] | None) -> None:
        """Inject ``properties`` into ``instance``.

        Args:
            instance: Component instance receiving the properties.
            properties: Mapping of property keys to values.

        """
        if not properties:
            return

        for key, value in properties.items():
            if value is None:
                continue

            setter = getattr(instance, setter_name(key), None)
            if callable(setter):
                setter(value)
            else:
                setattr(instance, key, value)
