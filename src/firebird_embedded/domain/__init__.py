"""Domain layer: lifecycle states, database location and errors."""

from firebird_embedded.domain.errors import (
    ConfigurationError,
    EmbeddedDatabaseError,
    EngineCreateError,
    EngineDropError,
    EngineStartError,
    EngineStopError,
    LifecycleStateError,
)
from firebird_embedded.domain.value_objects import DatabaseLocation, EngineState

__all__ = [
    "ConfigurationError",
    "DatabaseLocation",
    "EmbeddedDatabaseError",
    "EngineCreateError",
    "EngineDropError",
    "EngineStartError",
    "EngineState",
    "EngineStopError",
    "LifecycleStateError",
]
