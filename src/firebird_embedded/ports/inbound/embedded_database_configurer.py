"""Embedded database configurer port.

This inbound port is the narrow interface through which a bootstrap or
test harness drives the embedded database: populate connection properties
and start the database, then shut it down.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Protocol


@dataclass
class ConnectionProperties:
    """Values needed to open a connection to the configured database.

    The caller creates the record and the configurer fills it in place.
    """

    driver: str | None = None
    url: str | None = None
    username: str | None = None
    password: str | None = None

    def as_dict(self) -> dict[str, str | None]:
        """Return the four properties as a plain dict."""
        return asdict(self)


class EmbeddedDatabaseConfigurer(Protocol):
    """Protocol for embedded database lifecycle management."""

    @abstractmethod
    def configure_connection_properties(
        self, properties: ConnectionProperties, database_name: str
    ) -> None:
        """Populate ``properties`` and bring the database up.

        Raises:
            EmbeddedDatabaseError: If any startup step fails.
        """
        ...

    @abstractmethod
    def shutdown(self, data_source: Any, database_name: str) -> None:
        """Tear the database down.

        Raises:
            EmbeddedDatabaseError: If any teardown step fails.
        """
        ...
