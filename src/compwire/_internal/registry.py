from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from compwire.exceptions import CompwireInvalidRegistrationError

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Store raw component descriptors and classes by name.

    Registration is additive: the first value registered under a name wins and
    later registrations for the same name are ignored. This lets default
    component sets be added after user overrides without clobbering them.
    """

    def __init__(self) -> None:
        self._components: dict[str, Any] = {}

    def add_component(self, name: str, component: Any) -> bool:
        """Register a descriptor or class unless the name is already taken.

        Args:
            name: Component name used by lookups and name references.
            component: Descriptor mapping or already built class.

        Returns:
            ``True`` when the value was stored, ``False`` for a duplicate.

        Raises:
            CompwireInvalidRegistrationError: If ``name`` is not a non-empty string.

        """
        if not isinstance(name, str) or not name:
            msg = f"Component name must be a non-empty string, got {name!r}."
            raise CompwireInvalidRegistrationError(msg)

        if name in self._components:
            logger.debug("Ignoring duplicate registration of component %r", name)
            return False

        self._components[name] = component
        return True

    def add_components(self, components: Mapping[str, Any]) -> None:
        """Register every entry of ``components`` with ``add_component``.

        Args:
            components: Mapping of component names to descriptors or classes.

        """
        for name, component in components.items():
            self.add_component(name, component)

    def get(self, name: str) -> Any | None:
        """Return the raw value registered under ``name``, or ``None``."""
        return self._components.get(name)

    def names(self) -> list[str]:
        """Return registered names in registration order."""
        return list(self._components)

    def __contains__(self, name: object) -> bool:
        return name in self._components
