from __future__ import annotations

from typing import Any

import pytest

from compwire.config import FactoryConfig
from compwire.factory import ComponentFactory
from compwire.lock_mode import LockMode
from compwire.runtime import ClassRuntime, ComponentRuntime


@pytest.fixture()
def compwire_runtime() -> ComponentRuntime:
    """Provide the runtime used by ``compwire_factory``.

    Override this fixture to test against a different component runtime.

    Returns:
        A new ``ClassRuntime`` instance.

    """
    return ClassRuntime()


@pytest.fixture()
def compwire_components() -> dict[str, Any]:
    """Provide the initial registry content for ``compwire_factory``.

    Override this fixture in a test module or conftest to preload
    descriptors. The default is an empty registry.
    """
    return {}


@pytest.fixture()
def compwire_factory(
    compwire_runtime: ComponentRuntime,
    compwire_components: dict[str, Any],
) -> ComponentFactory:
    """Create a per-test component factory.

    The fixture is function-scoped, so the registry and class cache are
    isolated between tests unless users override fixture scope explicitly.

    Returns:
        A ``ComponentFactory`` using ``compwire_runtime`` and
        ``compwire_components``.

    """
    return ComponentFactory(
        FactoryConfig(
            runtime=compwire_runtime,
            components=compwire_components,
            lock_mode=LockMode.NONE,
        ),
    )
