"""Component runtime boundary and a reference class-based runtime.

A runtime turns a finalized prototype mapping into a constructible class.
``compwire`` never renders, attaches or binds anything itself; embedding
applications plug in the runtime that does. ``ClassRuntime`` is a minimal
runtime that declares plain Python subclasses of ``BaseComponent``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class ComponentRuntime(Protocol):
    """Declare component classes from prototype mappings.

    The class returned by ``define_component`` must expose the prototype's
    ``components`` dict as its ``components`` attribute. The resolver creates
    the class before its children are known and fills that dict in place.
    """

    def define_component(self, prototype: Mapping[str, Any]) -> type[Any]: ...


class BaseComponent:
    """Base class for components declared by ``ClassRuntime``.

    Instances are created with an options mapping. ``data`` seeds the
    instance data and ``el`` carries an existing root element for reverse
    binding; both are stored as given.
    """

    components: ClassVar[dict[str, type[Any]]] = {}

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self.options: dict[str, Any] = dict(options or {})
        self.data: dict[str, Any] = dict(self.options.get("data") or {})
        self.el: Any = self.options.get("el")


class ClassRuntime:
    """Declare components as subclasses of a base component class.

    Prototype fields become class attributes, so callables become methods.

    Examples:
        .. code-block:: python

            runtime = ClassRuntime()
            Greeting = runtime.define_component({"template": "<p>Hi</p>", "components": {}})
            greeting = Greeting({"data": {"name": "San"}})

    """

    def __init__(
        self,
        base: type[BaseComponent] = BaseComponent,
        *,
        class_name: str = "DefinedComponent",
    ) -> None:
        self.base = base
        self.class_name = class_name

    def define_component(self, prototype: Mapping[str, Any]) -> type[BaseComponent]:
        """Create a subclass of ``base`` carrying the prototype fields.

        Args:
            prototype: Behavior fields plus the ``components`` mapping.

        """
        return type(self.class_name, (self.base,), dict(prototype))


__all__ = ["BaseComponent", "ClassRuntime", "ComponentRuntime"]
