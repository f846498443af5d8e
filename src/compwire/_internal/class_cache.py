from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class ClassCache:
    """Hold resolved component classes by name.

    Entries are never replaced. A slot is reserved for a name as soon as its shell
    class exists, before any child is resolved, so back-references to that
    name find the same class object instead of starting a second build.
    Slots are only dropped again when the resolution that reserved them fails.
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[Any]] = {}

    def get(self, name: str) -> type[Any] | None:
        """Return the cached class for ``name``, if any."""
        return self._classes.get(name)

    def reserve(self, name: str, component_class: type[Any]) -> type[Any]:
        """Store ``component_class`` under ``name`` unless a class is already there.

        Args:
            name: Component name.
            component_class: Shell or finished class to store.

        Returns:
            The class held by the cache for ``name`` after the call.

        """
        return self._classes.setdefault(name, component_class)

    def discard(self, names: Iterable[str]) -> None:
        """Drop the entries for ``names``, ignoring names that are not cached.

        Used to roll back shells reserved by a resolution that failed before
        their children were complete.
        """
        for name in names:
            self._classes.pop(name, None)
