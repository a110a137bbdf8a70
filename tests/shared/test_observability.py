# tests/shared/test_observability.py
import json
import logging

import pytest
import structlog
from opentelemetry.sdk.trace import TracerProvider

from storefront import __version__
from storefront.shared import telemetry
from storefront.shared.config import settings
from storefront.shared.logging_config import add_trace_context, configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestTraceContext:

    def test_no_ids_outside_a_span(self):
        assert add_trace_context(None, None, {"event": "x"}) == {"event": "x"}

    def test_ids_inside_a_span(self):
        tracer = TracerProvider().get_tracer("tests")

        with tracer.start_as_current_span("work") as span:
            event = add_trace_context(None, None, {"event": "x"})

        ctx = span.get_span_context()
        assert event["trace_id"] == format(ctx.trace_id, "032x")
        assert event["span_id"] == format(ctx.span_id, "016x")


class TestConfigureLogging:

    def test_stdlib_records_share_the_json_format(self, monkeypatch, capsys, restore_logging):
        """
        Scenario: A library logs through the stdlib while LOG_FORMAT is json.
        Expected: One JSON line carrying level, logger name and service.
        """
        monkeypatch.setattr(settings, "LOG_FORMAT", "json")
        configure_logging()

        logging.getLogger("uvicorn.error").warning("port in use")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "port in use"
        assert record["level"] == "warning"
        assert record["logger"] == "uvicorn.error"
        assert record["service"] == settings.OTEL_SERVICE_NAME

    def test_level_filters_structlog_events(self, monkeypatch, capsys, restore_logging):
        monkeypatch.setattr(settings, "LOG_FORMAT", "json")
        monkeypatch.setattr(settings, "LOG_LEVEL", "warning")
        configure_logging()
        log = structlog.get_logger("tests.level")

        log.info("hidden")
        log.error("shown", order_id="abc")

        lines = capsys.readouterr().out.strip().splitlines()
        events = [json.loads(line)["event"] for line in lines]
        assert events == ["shown"]


class TestTelemetry:

    def test_disabled_without_endpoint(self, monkeypatch):
        monkeypatch.setattr(settings, "OTEL_EXPORTER_OTLP_ENDPOINT", None)
        monkeypatch.setattr(telemetry, "_provider", None)

        assert telemetry.setup_telemetry() is None

    def test_provider_carries_service_identity(self):
        provider = telemetry.build_tracer_provider("orders-svc", "http://collector:4318/")

        attributes = provider.resource.attributes
        assert attributes["service.name"] == "orders-svc"
        assert attributes["service.version"] == __version__
        assert attributes["deployment.environment"] == settings.APP_ENV.value
        provider.shutdown()

    def test_setup_runs_once(self, monkeypatch):
        installed = TracerProvider()
        monkeypatch.setattr(telemetry, "_provider", installed)

        assert telemetry.setup_telemetry() is installed
