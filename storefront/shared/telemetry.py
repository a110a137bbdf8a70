# storefront/shared/telemetry.py
"""
OpenTelemetry tracing.

Export is opt-in. Without OTEL_EXPORTER_OTLP_ENDPOINT the API's no-op
provider stays installed and the spans opened by use cases are discarded.
"""

from typing import Optional

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from storefront import __version__
from storefront.shared.config import settings

logger = structlog.get_logger()

# Request paths matching this pattern get no server span.
EXCLUDED_URLS = "health"

_provider: Optional[TracerProvider] = None


def build_tracer_provider(service_name: str, endpoint: str, debug: bool = False) -> TracerProvider:
    resource = Resource.create({
        SERVICE_NAME: service_name,
        SERVICE_VERSION: __version__,
        "deployment.environment": settings.APP_ENV.value,
    })
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint.rstrip('/')}/v1/traces"))
    )
    if debug:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    return provider


def setup_telemetry(service_name: Optional[str] = None) -> Optional[TracerProvider]:
    """
    Installs the global tracer provider once per process.
    Returns the provider, or None when export is not configured.
    """
    global _provider
    if _provider is not None:
        return _provider

    endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT
    if not endpoint:
        logger.info("telemetry_disabled", reason="no OTEL_EXPORTER_OTLP_ENDPOINT")
        return None

    name = service_name or settings.OTEL_SERVICE_NAME
    _provider = build_tracer_provider(name, endpoint, debug=settings.DEBUG)
    trace.set_tracer_provider(_provider)
    logger.info("telemetry_enabled", service=name, endpoint=endpoint)
    return _provider


def shutdown_telemetry() -> None:
    """Flushes buffered spans. Called once on application shutdown."""
    if _provider is not None:
        _provider.shutdown()


def instrument_fastapi(app) -> None:
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)


def get_tracer(name: str):
    return trace.get_tracer(name)
