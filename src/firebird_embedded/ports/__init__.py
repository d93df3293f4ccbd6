"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: APIs offered to callers (EmbeddedDatabaseConfigurer)
- Outbound ports: Dependencies on external systems (EngineManager,
  ResourceResolver)

Adapters implement these ports with concrete functionality.
"""

from firebird_embedded.ports.inbound import (
    ConnectionProperties,
    EmbeddedDatabaseConfigurer,
)
from firebird_embedded.ports.outbound import EngineManager, ResourceResolver

__all__ = [
    # Inbound ports
    "ConnectionProperties",
    "EmbeddedDatabaseConfigurer",
    # Outbound ports
    "EngineManager",
    "ResourceResolver",
]
