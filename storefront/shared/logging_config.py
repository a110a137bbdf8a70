# storefront/shared/logging_config.py
"""
Structured logging.

Application code logs through structlog. Records emitted by libraries
through the stdlib (uvicorn, SQLAlchemy) pass through the same processor
chain via ``structlog.stdlib.ProcessorFormatter``, so every line on stdout
has one shape: JSON in production, coloured key/value in development.
"""

import logging
import sys
from typing import Any, Dict, List

import structlog
from opentelemetry import trace

from storefront.shared.config import settings

# Loggers that install their own handlers unless told otherwise.
THIRD_PARTY_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def add_trace_context(_, __, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Adds the active span's trace and span ids. Logs outside a span carry neither."""
    ctx = trace.get_current_span().get_span_context()
    if ctx.is_valid:
        event_dict["trace_id"] = format(ctx.trace_id, "032x")
        event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def add_service_context(_, __, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict.setdefault("service", settings.OTEL_SERVICE_NAME)
    event_dict.setdefault("env", settings.APP_ENV.value)
    return event_dict


def _shared_processors() -> List[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_context,
        add_trace_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def _renderer(log_format: str):
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging() -> None:
    """
    Installs one stdout handler on the root logger and points structlog at it.
    Safe to call more than once; each call replaces the previous setup.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    shared = _shared_processors()

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + shared
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            _renderer(settings.LOG_FORMAT),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    for name in THIRD_PARTY_LOGGERS:
        third_party = logging.getLogger(name)
        third_party.handlers = []
        third_party.propagate = True
