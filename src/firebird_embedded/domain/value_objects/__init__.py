"""Value objects for the embedded database domain.

Exports:
    - EngineState: Engine lifecycle states (UNINITIALIZED, STARTED, ...)
    - DatabaseLocation: Database file path with parent directory checks
"""

from firebird_embedded.domain.value_objects.database_location import DatabaseLocation
from firebird_embedded.domain.value_objects.engine_state import EngineState

__all__ = [
    "DatabaseLocation",
    "EngineState",
]
