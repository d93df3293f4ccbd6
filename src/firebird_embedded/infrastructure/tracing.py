"""OpenTelemetry tracing configuration."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from firebird_embedded.infrastructure.config import ObservabilityConfig


_tracer: trace.Tracer | None = None


def setup_tracing(
    observability: ObservabilityConfig | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """
    Set up OpenTelemetry tracing.

    Args:
        observability: Service name and OTLP endpoint (defaults when None)
        console_export: Whether to also export to console (for debugging)

    Returns:
        Configured tracer instance
    """
    global _tracer

    from firebird_embedded import __version__

    observability = observability or ObservabilityConfig()
    provider = TracerProvider(
        resource=Resource.create(
            {
                "service.name": observability.otel_service_name,
                "service.version": __version__,
            }
        )
    )

    if observability.otel_endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=observability.otel_endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer(observability.otel_service_name)

    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the global tracer instance."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer("firebird_embedded")
    return _tracer


@contextmanager
def lifecycle_span(
    operation: str,
    database_name: str,
    plugin: str,
) -> Generator[trace.Span, None, None]:
    """
    Span around one lifecycle operation (configure or shutdown).

    An exception escaping the block is recorded on the span, which is
    marked as failed, and then re-raised.

    Args:
        operation: Lifecycle operation name
        database_name: Logical database name passed by the caller
        plugin: Engine plugin identifier
    """
    with get_tracer().start_as_current_span(f"embedded_db.{operation}") as span:
        span.set_attribute("db.system", "firebird")
        span.set_attribute("db.name", database_name)
        span.set_attribute("embedded_db.plugin", plugin)
        yield span
