"""Application layer for the embedded database lifecycle.

Exports:
    - EmbeddedFirebirdConfigurer: Process-wide lifecycle singleton
    - default_engine_factory: Builds the configured engine manager
    - embedded_database: Context manager around configure/shutdown
"""

from firebird_embedded.application.configurer import (
    EmbeddedFirebirdConfigurer,
    default_engine_factory,
)
from firebird_embedded.application.embedded_database import embedded_database

__all__ = [
    "EmbeddedFirebirdConfigurer",
    "default_engine_factory",
    "embedded_database",
]
