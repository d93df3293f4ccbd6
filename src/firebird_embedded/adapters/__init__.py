"""Adapters layer - concrete implementations of port interfaces.

Outbound adapters implement the engine manager and resource lookup.
"""

from firebird_embedded.adapters.outbound import (
    FileEngineManager,
    FirebirdEngineManager,
    PackageResourceResolver,
)

__all__ = [
    "FileEngineManager",
    "FirebirdEngineManager",
    "PackageResourceResolver",
]
