from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SkipValidation

from compwire.lock_mode import LockMode
from compwire.runtime import ComponentRuntime


class FactoryConfig(BaseModel):
    """Configure a ``ComponentFactory``.

    Mirrors the persisted configuration an embedding application supplies:
    ``{"runtime": ..., "components": {name: descriptor_or_class}}``. Plain
    mappings are accepted wherever a ``FactoryConfig`` is and are validated
    with ``FactoryConfig.model_validate``.

    Descriptor values are kept by reference; the model never copies or
    inspects them.

    Examples:
        .. code-block:: python

            config = FactoryConfig(
                runtime=ClassRuntime(),
                components={"greeting": {"template": "<p>Hi</p>"}},
            )
            factory = ComponentFactory(config)

    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    runtime: SkipValidation[ComponentRuntime | None] = None
    """Object exposing ``define_component``. Checked at resolution time, not here,
    so it may also be assigned later on the factory."""

    components: dict[str, Any] = Field(default_factory=dict)
    """Initial registry content, name to descriptor mapping or class."""

    lock_mode: LockMode = LockMode.THREAD
    """Locking discipline for registry mutation and resolution."""

    strict_requests: bool = False
    """Raise ``CompwireMalformedRequestError`` instead of returning ``None``."""


__all__ = ["FactoryConfig"]
