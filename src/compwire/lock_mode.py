from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for registry mutation and class resolution.

    Resolution is synchronous, so only thread locking is offered. Use
    ``NONE`` when a factory is confined to one thread.
    """

    THREAD = "thread"
    """Guard the registry and class cache with a re-entrant ``threading.RLock``."""

    NONE = "none"
    """Disable locking around registry and cache access."""
