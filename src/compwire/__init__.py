from compwire.config import FactoryConfig
from compwire.exceptions import (
    CompwireCircularLiteralError,
    CompwireComponentNotFoundError,
    CompwireEnvironmentInvalidError,
    CompwireError,
    CompwireInvalidReferenceError,
    CompwireInvalidRegistrationError,
    CompwireMalformedRequestError,
)
from compwire.factory import ComponentFactory, InstanceRequest
from compwire.lock_mode import LockMode
from compwire.runtime import BaseComponent, ClassRuntime, ComponentRuntime

__all__ = [
    "BaseComponent",
    "ClassRuntime",
    "ComponentFactory",
    "ComponentRuntime",
    "CompwireCircularLiteralError",
    "CompwireComponentNotFoundError",
    "CompwireEnvironmentInvalidError",
    "CompwireError",
    "CompwireInvalidReferenceError",
    "CompwireInvalidRegistrationError",
    "CompwireMalformedRequestError",
    "FactoryConfig",
    "InstanceRequest",
    "LockMode",
]
