"""Infrastructure layer - cross-cutting concerns."""

from firebird_embedded.infrastructure.config import Config, get_config
from firebird_embedded.infrastructure.logging import setup_logging, get_logger
from firebird_embedded.infrastructure.metrics import setup_metrics, MetricsRegistry
from firebird_embedded.infrastructure.native_library import publish_native_library_path
from firebird_embedded.infrastructure.tracing import setup_tracing, get_tracer

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "MetricsRegistry",
    "publish_native_library_path",
    "setup_tracing",
    "get_tracer",
]
