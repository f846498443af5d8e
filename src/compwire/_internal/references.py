from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from compwire._internal.type_checks import is_descriptor, is_runtime_class
from compwire.exceptions import CompwireInvalidReferenceError

SELF_REFERENCE = "self"
"""Child reference sentinel that points at the component being built."""

COMPONENTS_FIELD = "components"
"""Descriptor field holding child references."""

Descriptor: TypeAlias = Mapping[str, Any]
"""A behavior mapping describing one component."""


@dataclass(frozen=True, slots=True)
class SelfReference:
    """Refer to the component currently being built."""


@dataclass(frozen=True, slots=True)
class NameReference:
    """Refer to a registered component by name."""

    name: str


@dataclass(frozen=True, slots=True)
class ClassReference:
    """Wrap an already built class that is used as-is."""

    component_class: type[Any]


@dataclass(frozen=True, slots=True)
class LiteralReference:
    """Wrap a nested descriptor that is resolved anonymously."""

    descriptor: Descriptor


ChildReference: TypeAlias = SelfReference | NameReference | ClassReference | LiteralReference
ComponentEntry: TypeAlias = ClassReference | LiteralReference
"""Top-level registry or request value: either finished or still a descriptor."""


def classify_reference(value: object) -> ChildReference:
    """Turn a raw ``components`` value into a tagged child reference.

    Args:
        value: Raw value from a descriptor's ``components`` mapping.

    Raises:
        CompwireInvalidReferenceError: If the value is not a string, a class,
            or a descriptor mapping, or if it is an empty name.

    """
    if isinstance(value, str):
        if value == SELF_REFERENCE:
            return SelfReference()
        if not value:
            msg = "Component reference name must not be empty."
            raise CompwireInvalidReferenceError(msg)
        return NameReference(value)
    return classify_entry(value)


def classify_entry(value: object) -> ComponentEntry:
    """Tag a registered value or literal component as finished or unresolved.

    Args:
        value: A class or a descriptor mapping.

    Raises:
        CompwireInvalidReferenceError: If the value is neither.

    """
    if is_runtime_class(value):
        return ClassReference(value)
    if is_descriptor(value):
        return LiteralReference(value)
    msg = (
        "Component reference must be 'self', a component name, a class, or a "
        f"descriptor mapping, got {value!r}."
    )
    raise CompwireInvalidReferenceError(msg)


def child_references(descriptor: Descriptor) -> Mapping[str, object]:
    """Return the raw child references of a descriptor, empty when absent.

    Args:
        descriptor: Descriptor mapping to inspect.

    Raises:
        CompwireInvalidReferenceError: If ``components`` is not a mapping.

    """
    children = descriptor.get(COMPONENTS_FIELD)
    if children is None:
        return {}
    if not isinstance(children, Mapping):
        msg = f"Descriptor field '{COMPONENTS_FIELD}' must be a mapping, got {children!r}."
        raise CompwireInvalidReferenceError(msg)
    return children


__all__ = [
    "COMPONENTS_FIELD",
    "SELF_REFERENCE",
    "ChildReference",
    "ClassReference",
    "ComponentEntry",
    "Descriptor",
    "LiteralReference",
    "NameReference",
    "SelfReference",
    "child_references",
    "classify_entry",
    "classify_reference",
]
