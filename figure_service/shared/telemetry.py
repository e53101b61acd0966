# figure_service/shared/telemetry.py
import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from figure_service import __version__
from figure_service.shared.config import settings

logger = logging.getLogger(__name__)


def setup_telemetry(app_name: str = settings.OTEL_SERVICE_NAME) -> bool:
    """
    Installs an OTLP-exporting tracer provider for the figure service.

    Tracing stays off unless OTEL_EXPORTER_OTLP_ENDPOINT is set. Returns
    True when a provider was installed.
    """
    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("Tracing off for %s: OTEL_EXPORTER_OTLP_ENDPOINT is unset.", app_name)
        return False

    logger.info("Exporting traces for %s to %s", app_name, settings.OTEL_EXPORTER_OTLP_ENDPOINT)

    resource = Resource.create(attributes={
        "service.name": app_name,
        "deployment.environment": settings.APP_ENV.value,
        "service.version": __version__,
    })

    trace_provider = TracerProvider(resource=resource)

    endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT.rstrip("/")
    otlp_exporter = OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces")
    trace_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    if settings.DEBUG:
        trace_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(trace_provider)
    return True


def instrument_fastapi(app) -> None:
    """Adds a server span around each /figure and /health request when tracing is on."""
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app)


def get_tracer(name: str):
    """Tracer for spans opened by hand, e.g. around a classification."""
    return trace.get_tracer(name)
