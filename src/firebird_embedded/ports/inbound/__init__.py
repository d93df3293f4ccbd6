"""Inbound ports - APIs offered to callers."""

from firebird_embedded.ports.inbound.embedded_database_configurer import (
    ConnectionProperties,
    EmbeddedDatabaseConfigurer,
)

__all__ = [
    "ConnectionProperties",
    "EmbeddedDatabaseConfigurer",
]
