from __future__ import annotations


class CompwireError(Exception):
    """Represent a base class for all compwire-specific failures.

    Catch this type when you want to handle any compwire error path without
    matching each concrete exception class individually.
    """


class CompwireEnvironmentInvalidError(CompwireError):
    """Signal a missing or malformed component runtime.

    Raised by ``ComponentFactory.get_component_class``,
    ``ComponentFactory.resolve_anonymous`` and every other resolution path when
    the configured runtime does not expose a callable ``define_component``.
    The runtime is checked lazily, so a factory may be constructed first and
    have its runtime assigned later.

    Typical fix is passing ``runtime=ClassRuntime()`` (or your own runtime) in
    the factory configuration, or assigning ``factory.runtime`` before the
    first resolution.
    """


class CompwireComponentNotFoundError(CompwireError):
    """Signal a named lookup of a component that is not registered.

    Raised by ``get_component_class`` for the requested name and for any name
    reference found in a descriptor's ``components`` mapping.

    Typical fixes include registering the component with ``add_component`` or
    correcting a typo in a child reference.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Component '{name}' is not registered.")


class CompwireMalformedRequestError(CompwireError):
    """Signal a ``create_instance`` request without a usable ``component``.

    Only raised when the factory is configured with ``strict_requests=True``.
    By default malformed requests produce ``None`` instead.
    """


class CompwireInvalidReferenceError(CompwireError):
    """Signal a component reference of an unsupported type.

    A reference must be the ``"self"`` sentinel, a component name, an already
    built class, or a literal descriptor mapping.
    """


class CompwireInvalidRegistrationError(CompwireError):
    """Signal invalid registry input, such as an empty or non-string name."""


class CompwireCircularLiteralError(CompwireError):
    """Signal a literal descriptor that contains itself.

    Literal descriptors are resolved anonymously and never cached, so a
    literal nested inside itself cannot terminate. Register the component
    under a name and reference it by that name to build a cycle.
    """
