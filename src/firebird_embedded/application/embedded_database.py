"""Context manager pairing configure and shutdown."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from firebird_embedded.application.configurer import EmbeddedFirebirdConfigurer
from firebird_embedded.ports.inbound.embedded_database_configurer import (
    ConnectionProperties,
    EmbeddedDatabaseConfigurer,
)


@contextmanager
def embedded_database(
    database_name: str = "testdb",
    configurer: EmbeddedDatabaseConfigurer | None = None,
) -> Iterator[ConnectionProperties]:
    """Bring the embedded database up for the duration of a ``with`` block.

    Example:
        with embedded_database() as properties:
            connect(properties.url, properties.username, properties.password)

    Args:
        database_name: Logical database name passed to the configurer.
        configurer: Configurer to drive (default: the process-wide one).

    Yields:
        The populated connection properties.
    """
    configurer = configurer or EmbeddedFirebirdConfigurer.get_instance()
    properties = ConnectionProperties()
    configurer.configure_connection_properties(properties, database_name)
    try:
        yield properties
    finally:
        configurer.shutdown(None, database_name)
