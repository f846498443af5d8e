from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Mapping, MutableMapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from compwire._internal.class_cache import ClassCache
from compwire._internal.references import (
    COMPONENTS_FIELD,
    ClassReference,
    ComponentEntry,
    Descriptor,
    LiteralReference,
    NameReference,
    SelfReference,
    child_references,
    classify_entry,
    classify_reference,
)
from compwire._internal.registry import ComponentRegistry
from compwire._internal.type_checks import is_runtime_class
from compwire.exceptions import (
    CompwireCircularLiteralError,
    CompwireComponentNotFoundError,
    CompwireEnvironmentInvalidError,
)
from compwire.runtime import ComponentRuntime

logger = logging.getLogger(__name__)

DefineComponent = Callable[[Mapping[str, Any]], type[Any]]


@dataclass(slots=True)
class _ResolutionPass:
    """State shared by one top-level resolution call."""

    define_component: DefineComponent
    literals_in_flight: set[int] = field(default_factory=set)
    reserved_names: list[str] = field(default_factory=list)


class ComponentResolver:
    """Build component classes from descriptors, caching named results.

    Named components are declared as shell classes and stored in the class
    cache before their children are resolved. A child that refers back to a
    name under construction, directly or through a longer cycle, therefore
    receives the shell already in the cache, and every participant of a cycle
    ends up holding the same class objects. If a top-level call fails, every
    shell it reserved is dropped from the cache again, so a later lookup
    rebuilds it instead of returning a half-populated class.

    Literal descriptors are built anonymously on every call and never cached.
    Named children inside them still go through the cache.
    """

    def __init__(
        self,
        registry: ComponentRegistry,
        cache: ClassCache,
        runtime: ComponentRuntime | None = None,
    ) -> None:
        self.registry = registry
        self.cache = cache
        self.runtime = runtime

    def get_component_class(self, name: str) -> type[Any]:
        """Return the class for a registered name, building it on first use.

        Args:
            name: Registered component name.

        Raises:
            CompwireEnvironmentInvalidError: If no usable runtime is configured.
            CompwireComponentNotFoundError: If ``name`` (or a name referenced by
                its descendants) is not registered.
            CompwireInvalidReferenceError: If a child reference has an
                unsupported type.

        """
        resolution = _ResolutionPass(self._require_define_component())
        with self._rollback_on_error(resolution):
            return self._get_named(name, resolution)

    def resolve_anonymous(self, descriptor: Any) -> type[Any]:
        """Build a fresh class from a literal descriptor without caching it.

        An already built class is returned unchanged.

        Args:
            descriptor: Literal descriptor mapping or class.

        Raises:
            CompwireEnvironmentInvalidError: If no usable runtime is configured.
            CompwireComponentNotFoundError: If a nested name is not registered.
            CompwireInvalidReferenceError: If ``descriptor`` or a child
                reference has an unsupported type.

        """
        resolution = _ResolutionPass(self._require_define_component())
        with self._rollback_on_error(resolution):
            return self._build(classify_entry(descriptor), None, resolution)

    @contextmanager
    def _rollback_on_error(self, resolution: _ResolutionPass) -> Generator[None, None, None]:
        try:
            yield
        except BaseException:
            if resolution.reserved_names:
                logger.debug(
                    "Discarding shells %r after failed resolution",
                    resolution.reserved_names,
                )
                self.cache.discard(resolution.reserved_names)
            raise

    def _require_define_component(self) -> DefineComponent:
        if self.runtime is None:
            msg = "No component runtime is configured; set 'runtime' on the factory."
            raise CompwireEnvironmentInvalidError(msg)

        define_component = getattr(self.runtime, "define_component", None)
        if not callable(define_component):
            msg = (
                f"Component runtime {self.runtime!r} does not provide a callable "
                "'define_component'."
            )
            raise CompwireEnvironmentInvalidError(msg)
        return define_component

    def _get_named(self, name: str, resolution: _ResolutionPass) -> type[Any]:
        cached = self.cache.get(name)
        if cached is not None:
            logger.debug("Component %r served from class cache", name)
            return cached

        if name not in self.registry:
            raise CompwireComponentNotFoundError(name)

        return self._build(classify_entry(self.registry.get(name)), name, resolution)

    def _build(
        self,
        entry: ComponentEntry,
        name: str | None,
        resolution: _ResolutionPass,
    ) -> type[Any]:
        if isinstance(entry, ClassReference):
            if name is not None:
                return self.cache.reserve(name, entry.component_class)
            return entry.component_class

        descriptor = entry.descriptor
        if name is not None:
            return self._build_named(descriptor, name, resolution)

        marker = id(descriptor)
        if marker in resolution.literals_in_flight:
            msg = "Literal component descriptor contains itself; register it by name to form a cycle."
            raise CompwireCircularLiteralError(msg)

        resolution.literals_in_flight.add(marker)
        try:
            shell = self._declare_shell(descriptor, resolution)
            self._resolve_children(shell, descriptor, resolution)
        finally:
            resolution.literals_in_flight.discard(marker)
        return shell

    def _build_named(
        self,
        descriptor: Descriptor,
        name: str,
        resolution: _ResolutionPass,
    ) -> type[Any]:
        shell = self._declare_shell(descriptor, resolution)
        cached = self.cache.reserve(name, shell)
        if cached is not shell:
            return cached

        resolution.reserved_names.append(name)
        logger.debug("Declared shell class for component %r", name)

        # Literal nesting restarts below a name; a literal reached again through
        # a cached name terminates there.
        enclosing_literals = resolution.literals_in_flight
        resolution.literals_in_flight = set()
        try:
            self._resolve_children(shell, descriptor, resolution)
        finally:
            resolution.literals_in_flight = enclosing_literals
        return shell

    def _declare_shell(self, descriptor: Descriptor, resolution: _ResolutionPass) -> type[Any]:
        prototype: dict[str, Any] = {
            key: value for key, value in descriptor.items() if key != COMPONENTS_FIELD
        }
        prototype[COMPONENTS_FIELD] = {}

        shell = resolution.define_component(prototype)
        if not is_runtime_class(shell):
            msg = f"Component runtime returned {shell!r} from 'define_component', expected a class."
            raise CompwireEnvironmentInvalidError(msg)
        if not isinstance(getattr(shell, COMPONENTS_FIELD, None), MutableMapping):
            msg = (
                f"Component class {shell!r} does not expose a mutable "
                f"'{COMPONENTS_FIELD}' mapping."
            )
            raise CompwireEnvironmentInvalidError(msg)
        return shell

    def _resolve_children(
        self,
        shell: type[Any],
        descriptor: Descriptor,
        resolution: _ResolutionPass,
    ) -> None:
        resolved_children: MutableMapping[str, type[Any]] = getattr(shell, COMPONENTS_FIELD)
        for key, raw_reference in child_references(descriptor).items():
            reference = classify_reference(raw_reference)
            if isinstance(reference, SelfReference):
                resolved_children[key] = shell
            elif isinstance(reference, NameReference):
                resolved_children[key] = self._get_named(reference.name, resolution)
            elif isinstance(reference, LiteralReference):
                resolved_children[key] = self._build(reference, None, resolution)
            else:
                resolved_children[key] = reference.component_class
