from __future__ import annotations

import types
from collections.abc import Mapping
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is an already built component class.

    Args:
        candidate: Value being checked.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_descriptor(candidate: object) -> TypeGuard[Mapping[str, Any]]:
    """Return true when candidate is a literal descriptor mapping.

    Args:
        candidate: Value being checked.

    """
    return isinstance(candidate, Mapping)


__all__ = ["is_descriptor", "is_runtime_class"]
