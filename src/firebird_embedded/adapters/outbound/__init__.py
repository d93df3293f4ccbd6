"""Outbound adapters - implementations of outbound ports.

These adapters drive the embedded engine (native or file-based) and
resolve bundled resources.
"""

from firebird_embedded.adapters.outbound.file_engine_manager import FileEngineManager
from firebird_embedded.adapters.outbound.firebird_engine_manager import FirebirdEngineManager
from firebird_embedded.adapters.outbound.package_resource_resolver import (
    PackageResourceResolver,
)

__all__ = [
    "FileEngineManager",
    "FirebirdEngineManager",
    "PackageResourceResolver",
]
