# figure_service/shared/logging_config.py
import sys
import logging
from typing import Optional, TextIO

import structlog
from opentelemetry import trace

from figure_service.shared.config import settings


def add_open_telemetry_spans(_, __, event_dict):
    """Stamps each log entry with the active span's trace and span ids (None outside a span)."""
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def configure_logging(stream: Optional[TextIO] = None):
    """
    Sets up structlog for the service: JSON lines when LOG_FORMAT is "json",
    the console renderer otherwise, filtered at LOG_LEVEL.

    ``stream`` defaults to stdout; the CLI passes stderr so that log lines
    never mix with its results.
    """
    stream = stream or sys.stdout
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    processors = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    # Uvicorn and other third-party libraries still log through stdlib logging.
    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=level,
    )
