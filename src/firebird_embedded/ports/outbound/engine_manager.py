"""Engine Manager port for the embedded database engine.

This outbound port defines the contract for starting and stopping the
embedded engine and for creating and dropping database files through it.
Implementations may drive the native Firebird client library or a plain
file on disk.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol


class EngineManager(Protocol):
    """Protocol for embedded engine management.

    The configurer holds exactly one engine manager for the process and
    calls it in the order start, create_database, drop_database, stop.
    Construction must not perform I/O.

    Thread Safety:
        Implementations are not required to be thread-safe. Callers
        serialize lifecycle calls.
    """

    @property
    @abstractmethod
    def plugin(self) -> str:
        """Return the engine plugin identifier this manager is bound to."""
        ...

    @abstractmethod
    def start(self) -> None:
        """Start the engine.

        Raises:
            Exception: Any failure reported by the engine.
        """
        ...

    @abstractmethod
    def create_database(self, path: Path, user: str, password: str) -> None:
        """Create a database file.

        Args:
            path: Database file path. The parent directory exists.
            user: Database owner.
            password: Owner password (may be empty).

        Raises:
            Exception: Any failure reported by the engine (permissions,
                an existing or corrupt file).
        """
        ...

    @abstractmethod
    def drop_database(self, path: Path, user: str, password: str) -> None:
        """Drop a database file created by :meth:`create_database`.

        Raises:
            Exception: Any failure reported by the engine.
        """
        ...

    @abstractmethod
    def stop(self) -> None:
        """Stop the engine.

        Raises:
            Exception: Any failure reported by the engine.
        """
        ...
