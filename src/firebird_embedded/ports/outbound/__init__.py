"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for the systems the lifecycle depends on:
the embedded engine manager and bundled resource lookup.
"""

from firebird_embedded.ports.outbound.engine_manager import EngineManager
from firebird_embedded.ports.outbound.resource_resolver import ResourceResolver

__all__ = [
    "EngineManager",
    "ResourceResolver",
]
