from compwire.integrations.pytest_plugin.plugin import (
    compwire_components,
    compwire_factory,
    compwire_runtime,
)

__all__ = ["compwire_components", "compwire_factory", "compwire_runtime"]
