"""OpenTelemetry tracing and metrics export setup."""

from __future__ import annotations

from typing import Any

import structlog
from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from blog_api import __version__

SERVICE_NAME = "blog-api"

_initialized = False

_log = structlog.get_logger()


def init_telemetry(endpoint: str | None) -> None:
    """Configure OTLP export of traces and metrics.

    No-op if *endpoint* is empty or telemetry is already initialized.
    """
    global _initialized  # noqa: PLW0603
    if not endpoint or _initialized:
        return

    resource = Resource.create({"service.name": SERVICE_NAME, "service.version": __version__})

    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
    trace.set_tracer_provider(tracer_provider)

    reader = PeriodicExportingMetricReader(OTLPMetricExporter(endpoint=endpoint))
    metrics.set_meter_provider(MeterProvider(metric_readers=[reader], resource=resource))

    _initialized = True
    _log.info("telemetry_initialized", endpoint=endpoint)


def shutdown_telemetry() -> None:
    """Flush and shutdown providers."""
    global _initialized  # noqa: PLW0603
    provider = trace.get_tracer_provider()
    if isinstance(provider, TracerProvider):
        provider.shutdown()

    meter_provider = metrics.get_meter_provider()
    if isinstance(meter_provider, MeterProvider):
        meter_provider.shutdown()

    _initialized = False


def add_trace_context(logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Structlog processor that injects trace_id and span_id from the active span."""
    ctx = trace.get_current_span().get_span_context()
    if ctx and ctx.trace_id:
        event_dict["trace_id"] = format(ctx.trace_id, "032x")
        event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict
