"""Engine lifecycle states.

These states track how far the embedded engine has progressed through
startup and teardown.
"""

from __future__ import annotations

from enum import Enum


class EngineState(Enum):
    """Embedded engine lifecycle states.

    State machine:

        UNINITIALIZED ──start()──> STARTED ──create_database()──> DATABASE_CREATED
                                      ^                                 │
                                      │                          drop_database()
                                   start()                              │
                                      │                                 v
                                   STOPPED <────────stop()──────── DATABASE_DROPPED

    A failed step leaves the state at the last step that succeeded. There is
    no rollback. STOPPED may start again within the same process because the
    engine handle is never released.
    """

    UNINITIALIZED = 0
    """Engine handle exists but the engine has never been started."""

    STARTED = 1
    """Engine is running; the database file has not been created."""

    DATABASE_CREATED = 2
    """Database file exists and is ready for connections."""

    DATABASE_DROPPED = 3
    """Database file has been removed; the engine is still running."""

    STOPPED = 4
    """Engine has been stopped."""

    def can_transition_to(self, target: EngineState) -> bool:
        """Check whether ``target`` is the next happy-path state."""
        return target in _TRANSITIONS[self]

    def is_running(self) -> bool:
        """Check if the engine is running."""
        return self in (
            EngineState.STARTED,
            EngineState.DATABASE_CREATED,
            EngineState.DATABASE_DROPPED,
        )


_TRANSITIONS: dict[EngineState, frozenset[EngineState]] = {
    EngineState.UNINITIALIZED: frozenset({EngineState.STARTED}),
    EngineState.STARTED: frozenset({EngineState.DATABASE_CREATED}),
    EngineState.DATABASE_CREATED: frozenset({EngineState.DATABASE_DROPPED}),
    EngineState.DATABASE_DROPPED: frozenset({EngineState.STOPPED}),
    EngineState.STOPPED: frozenset({EngineState.STARTED}),
}
