from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import Any

from compwire._internal.class_cache import ClassCache
from compwire._internal.injection import PropertyInjector
from compwire._internal.registry import ComponentRegistry
from compwire._internal.resolver import ComponentResolver
from compwire._internal.type_checks import is_descriptor, is_runtime_class
from compwire.config import FactoryConfig
from compwire.exceptions import CompwireMalformedRequestError
from compwire.lock_mode import LockMode
from compwire.runtime import ComponentRuntime

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InstanceRequest:
    """Describe one ``create_instance`` call.

    Attributes:
        component: Registered component name, literal descriptor mapping, or an
            already built class.
        options: Construction options passed to the class, for example
            ``{"data": {...}}`` or ``{"el": element}``.
        properties: Values injected after construction, preferring
            ``set<Key>`` methods over attribute assignment.

    """

    component: Any = None
    options: Mapping[str, Any] | None = None
    properties: Mapping[str, Any] | None = None


class ComponentFactory:
    """Resolve component classes from named descriptors and create instances.

    Each factory owns its registry and class cache, so two factories never
    share classes even when configured with the same descriptors. Named
    components resolve to the same class object on every lookup, including
    components that refer to themselves or to each other in cycles.

    Examples:
        .. code-block:: python

            factory = ComponentFactory(
                {
                    "runtime": ClassRuntime(),
                    "components": {
                        "tree": {"template": "<ul/>", "components": {"node": "self"}},
                    },
                },
            )

            Tree = factory.get_component_class("tree")
            assert Tree.components["node"] is Tree

            tree = factory.create_instance({"component": "tree", "options": {"data": {}}})

    """

    def __init__(self, config: FactoryConfig | Mapping[str, Any] | None = None) -> None:
        """Initialize a factory from a configuration object or mapping.

        Args:
            config: ``FactoryConfig`` instance, plain mapping validated into
                one, or ``None`` for an empty factory without a runtime.

        """
        if config is None:
            config = FactoryConfig()
        elif not isinstance(config, FactoryConfig):
            config = FactoryConfig.model_validate(config)

        self.config = config
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if config.lock_mode is LockMode.THREAD else nullcontext()
        )
        self._registry = ComponentRegistry()
        self._class_cache = ClassCache()
        self._resolver = ComponentResolver(self._registry, self._class_cache, config.runtime)
        self._property_injector = PropertyInjector()

        self._registry.add_components(config.components)

    @property
    def runtime(self) -> ComponentRuntime | None:
        """Return the component runtime used to declare classes."""
        return self._resolver.runtime

    @runtime.setter
    def runtime(self, runtime: ComponentRuntime | None) -> None:
        with self._lock:
            self._resolver.runtime = runtime

    # region Registry
    def add_component(self, name: str, component: Any) -> bool:
        """Register a descriptor or class under ``name`` unless already registered.

        The first registration of a name wins; duplicates are ignored without
        error. Registering after a name was resolved has no effect on the
        cached class.

        Args:
            name: Component name.
            component: Descriptor mapping or already built class.

        Returns:
            ``True`` when the component was stored.

        Raises:
            CompwireInvalidRegistrationError: If ``name`` is not a non-empty string.

        """
        with self._lock:
            return self._registry.add_component(name, component)

    def add_components(self, components: Mapping[str, Any]) -> None:
        """Register every entry of ``components`` with ``add_component``."""
        with self._lock:
            self._registry.add_components(components)

    def get_component(self, name: str) -> Any | None:
        """Return the raw descriptor or class registered under ``name``."""
        with self._lock:
            return self._registry.get(name)

    # endregion Registry

    # region Resolution
    def get_component_class(self, name: str) -> type[Any]:
        """Return the class for a registered component name.

        The first call builds the class; later calls return the same object.

        Args:
            name: Registered component name.

        Raises:
            CompwireEnvironmentInvalidError: If no usable runtime is configured.
            CompwireComponentNotFoundError: If the name, or a name referenced
                by its descendants, is not registered.

        """
        with self._lock:
            return self._resolver.get_component_class(name)

    def resolve_anonymous(self, descriptor: Any) -> type[Any]:
        """Build a fresh, uncached class from a literal descriptor.

        Raises:
            CompwireEnvironmentInvalidError: If no usable runtime is configured.
            CompwireComponentNotFoundError: If a nested name is not registered.

        """
        with self._lock:
            return self._resolver.resolve_anonymous(descriptor)

    def get_all_component_classes(self) -> dict[str, type[Any]]:
        """Resolve every registered name and return a name to class mapping."""
        with self._lock:
            return {
                name: self._resolver.get_component_class(name) for name in self._registry.names()
            }

    # endregion Resolution

    # region Instances
    def create_instance(
        self,
        request: InstanceRequest | Mapping[str, Any] | None = None,
    ) -> Any | None:
        """Resolve a component, construct an instance and inject properties.

        Malformed requests (no request, or a ``component`` that is neither a
        name, a descriptor mapping nor a class) produce ``None``. Set
        ``strict_requests=True`` in the configuration to raise instead.

        Args:
            request: ``InstanceRequest`` or mapping with ``component``,
                ``options`` and ``properties`` keys.

        Returns:
            The new instance, or ``None`` for a malformed request.

        Raises:
            CompwireMalformedRequestError: For a malformed request in strict mode.
            CompwireEnvironmentInvalidError: If no usable runtime is configured.
            CompwireComponentNotFoundError: If a named component is not registered.

        """
        instance_request = self._parse_request(request)
        if instance_request is None:
            return None

        component = instance_request.component
        if isinstance(component, str):
            component_class = self.get_component_class(component)
        else:
            component_class = self.resolve_anonymous(component)

        instance = component_class(instance_request.options)
        self._property_injector.inject(instance, instance_request.properties)
        return instance

    def _parse_request(self, request: object) -> InstanceRequest | None:
        if isinstance(request, InstanceRequest):
            instance_request = request
        elif isinstance(request, Mapping):
            instance_request = InstanceRequest(
                component=request.get("component"),
                options=request.get("options"),
                properties=request.get("properties"),
            )
        else:
            return self._reject_request(f"Unsupported instance request {request!r}.")

        component = instance_request.component
        if isinstance(component, str):
            if not component:
                return self._reject_request("Instance request component name is empty.")
        elif not (is_descriptor(component) or is_runtime_class(component)):
            return self._reject_request(f"Instance request has no usable component: {component!r}.")
        return instance_request

    def _reject_request(self, msg: str) -> None:
        if self.config.strict_requests:
            raise CompwireMalformedRequestError(msg)
        logger.debug("Dropping malformed instance request: %s", msg)

    # endregion Instances
