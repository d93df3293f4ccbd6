"""Prometheus metrics for the embedded database lifecycle."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of lifecycle metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        self.lifecycle_operations_total = Counter(
            "embedded_db_lifecycle_operations_total",
            "Lifecycle operations attempted",
            ["operation", "status"],  # status: success, error
            registry=self._registry,
        )

        self.lifecycle_duration_seconds = Histogram(
            "embedded_db_lifecycle_duration_seconds",
            "Lifecycle operation duration in seconds",
            ["operation"],  # configure, shutdown
            buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
            registry=self._registry,
        )

        self.engine_state = Gauge(
            "embedded_db_engine_state",
            "Ordinal of the current engine lifecycle state",
            registry=self._registry,
        )

        self.info = Info(
            "embedded_db",
            "Embedded database information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Return the collector registry the metrics are registered on."""
        return self._registry

    def record_operation(self, operation: str, success: bool) -> None:
        """Count one lifecycle operation outcome."""
        status = "success" if success else "error"
        self.lifecycle_operations_total.labels(operation=operation, status=status).inc()


_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    target = registry or REGISTRY
    # Collectors can be registered only once per CollectorRegistry.
    if _metrics is None or _metrics.registry is not target:
        _metrics = MetricsRegistry(target)

    from firebird_embedded import __version__
    _metrics.info.info({
        "version": __version__,
    })

    start_http_server(port, registry=target)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
