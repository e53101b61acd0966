# tests/shared/test_config.py
import pytest
from opentelemetry import trace

from figure_service.shared import telemetry
from figure_service.shared.config import AppEnv, Settings, settings
from figure_service.shared.logging_config import add_open_telemetry_spans


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("HOST", "PORT", "APP_ENV", "LOG_FORMAT"):
            monkeypatch.delenv(name, raising=False)

        cfg = Settings(_env_file=None)

        assert cfg.HOST == "127.0.0.1"
        assert cfg.PORT == 3030
        assert cfg.APP_ENV == AppEnv.DEVELOPMENT
        assert cfg.docs_enabled is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("LOG_FORMAT", "console")

        cfg = Settings(_env_file=None)

        assert cfg.PORT == 8080
        assert cfg.APP_ENV == AppEnv.PRODUCTION
        assert cfg.LOG_FORMAT == "console"
        assert cfg.docs_enabled is False

    def test_invalid_port_is_rejected(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(ValueError):
            Settings(_env_file=None)


class TestObservability:
    def test_telemetry_disabled_without_endpoint(self, monkeypatch):
        monkeypatch.setattr(settings, "OTEL_EXPORTER_OTLP_ENDPOINT", None)
        assert telemetry.setup_telemetry("figure-service-test") is False

    def test_log_entries_without_active_span(self):
        event = add_open_telemetry_spans(None, "info", {"event": "x"})
        assert event["trace_id"] is None
        assert event["span_id"] is None

    def test_log_entries_inside_a_recording_span(self):
        from opentelemetry.sdk.trace import TracerProvider

        tracer = TracerProvider().get_tracer(__name__)
        with tracer.start_as_current_span("test") as span:
            event = add_open_telemetry_spans(None, "info", {"event": "x"})

        assert event["trace_id"] == format(span.get_span_context().trace_id, "032x")
        assert len(event["span_id"]) == 16
        assert trace.get_current_span() is not span
