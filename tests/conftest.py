"""Shared pytest fixtures for compwire tests."""

import pytest

from compwire.factory import ComponentFactory
from compwire.lock_mode import LockMode
from compwire.runtime import ClassRuntime


@pytest.fixture()
def runtime() -> ClassRuntime:
    """Reference runtime declaring plain BaseComponent subclasses."""
    return ClassRuntime()


@pytest.fixture()
def factory(runtime: ClassRuntime) -> ComponentFactory:
    """Empty factory with a runtime and default thread locking."""
    return ComponentFactory({"runtime": runtime})


@pytest.fixture()
def unlocked_factory(runtime: ClassRuntime) -> ComponentFactory:
    """Empty factory with locking disabled."""
    return ComponentFactory({"runtime": runtime, "lock_mode": LockMode.NONE})
