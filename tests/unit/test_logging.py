"""Structured logging tests."""

from unittest.mock import MagicMock

import structlog

from sensor_loadtest.config import settings
from sensor_loadtest.logging import (
    LoadTestLogger,
    add_app_context,
    build_processors,
    truncate_payload_blobs,
)


class TestProcessors:
    """structlog processor tests."""

    def test_add_app_context(self, monkeypatch):
        """App name and environment are added."""
        monkeypatch.setattr(settings, "env", "test")

        event_dict = add_app_context(None, "info", {"event": "x"})

        assert event_dict["app"] == "sensor-loadtest"
        assert event_dict["environment"] == "test"

    def test_long_payload_blob_is_truncated(self):
        """Long data values are cut to 64 chars plus the original length."""
        blob = "A" * 500

        event_dict = truncate_payload_blobs(None, "info", {"event": "x", "data": blob})

        assert event_dict["data"] == "A" * 64 + "...(500 chars)"

    def test_short_values_untouched(self):
        """Short data values and other keys are left alone."""
        event_dict = truncate_payload_blobs(
            None, "info", {"event": "x", "data": "short", "url": "B" * 200}
        )

        assert event_dict["data"] == "short"
        assert event_dict["url"] == "B" * 200


class TestLoadTestLogger:
    """LoadTestLogger helper tests."""

    def test_log_request(self):
        """Request events carry method, url, status and sizes."""
        helper = LoadTestLogger()
        helper.logger = MagicMock()

        helper.log_request("POST", "/api/sensor-rw", 200, 12.5, payload_size=2048)

        helper.logger.info.assert_called_once_with(
            "request_completed",
            event_type="request",
            method="POST",
            url="/api/sensor-rw",
            status=200,
            duration_ms=12.5,
            payload_size=2048,
        )

    def test_log_violations(self):
        """Violation events carry the count and messages."""
        helper = LoadTestLogger()
        helper.logger = MagicMock()

        helper.log_violations("/api/stats", ["a", "b"])

        kwargs = helper.logger.warning.call_args.kwargs
        assert kwargs["violation_count"] == 2
        assert kwargs["violations"] == ["a", "b"]

    def test_log_slow_request(self):
        """Slow request events are warnings."""
        helper = LoadTestLogger()
        helper.logger = MagicMock()

        helper.log_slow_request("/health", 1500.0, 1000.0)

        helper.logger.warning.assert_called_once()
        assert helper.logger.warning.call_args.args == ("slow_request",)


class TestBuildProcessors:
    """Processor chain selection tests."""

    def test_development_renders_console(self):
        """Development ends with the console renderer."""
        chain = build_processors("development")

        assert isinstance(chain[-1], structlog.dev.ConsoleRenderer)
        assert truncate_payload_blobs in chain

    def test_other_environments_render_json(self):
        """Non-development environments end with the JSON renderer."""
        for env in ("test", "production"):
            chain = build_processors(env)

            assert isinstance(chain[-1], structlog.processors.JSONRenderer)
            assert add_app_context in chain
