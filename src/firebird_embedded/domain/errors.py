"""Errors raised by the embedded database lifecycle.

Every engine or filesystem failure is re-raised as one of these types with
the original exception chained as ``__cause__``. None of them is retried.
"""

from __future__ import annotations


class EmbeddedDatabaseError(Exception):
    """Base class for embedded database lifecycle failures."""


class ConfigurationError(EmbeddedDatabaseError):
    """The environment cannot host the database.

    Raised when the bundled native resource does not resolve to a directory
    on the filesystem, or when the database's parent path is not a directory.
    """


class EngineStartError(EmbeddedDatabaseError):
    """The engine manager failed to start."""


class EngineCreateError(EmbeddedDatabaseError):
    """The engine manager failed to create the database file."""


class EngineDropError(EmbeddedDatabaseError):
    """The engine manager failed to drop the database file."""


class EngineStopError(EmbeddedDatabaseError):
    """The engine manager failed to stop."""


class LifecycleStateError(EmbeddedDatabaseError):
    """An operation was requested in a state that does not allow it."""
