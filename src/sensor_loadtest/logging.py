"""Structured logging configuration for load-test runs.

This module provides console or JSON logging with request tracking so that a
run can be correlated with the server's own logs afterwards.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from sensor_loadtest.config import settings

MAX_LOGGED_BLOB_LENGTH = 64


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to all log entries."""
    event_dict["app"] = "sensor-loadtest"
    event_dict["environment"] = settings.env
    return event_dict


def truncate_payload_blobs(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Shorten base64 payload blobs in log entries.

    Any string under a ``data`` key longer than 64 characters is cut and
    suffixed with its original length.
    """
    for key, value in event_dict.items():
        if key.lower() == "data" and isinstance(value, str) and len(value) > MAX_LOGGED_BLOB_LENGTH:
            event_dict[key] = f"{value[:MAX_LOGGED_BLOB_LENGTH]}...({len(value)} chars)"

    return event_dict


def build_processors(env: str) -> list[Processor]:
    """Processor chain for the given environment.

    Development renders colored console lines; every other environment emits
    one JSON object per event so runs can be shipped to a log pipeline.
    """
    chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_app_context,
        truncate_payload_blobs,
        structlog.processors.format_exc_info,
    ]

    if env == "development":
        chain.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    else:
        chain.extend((structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()))
    return chain


def configure_logging(env: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        env: Overrides ``settings.env`` when given
    """
    env = env or settings.env
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if env == "development" else logging.INFO,
    )
    structlog.configure(
        processors=build_processors(env),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a configured structured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Structured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("request_sent", endpoint="/api/sensor-rw", status=200)
    """
    return structlog.get_logger(name)


class LoadTestLogger:
    """Helper class for logging per-request load-test events."""

    def __init__(self) -> None:
        self.logger = get_logger("loadtest")

    def log_request(
        self,
        method: str,
        url: str,
        status: int | None,
        duration_ms: float | None,
        payload_size: int | None = None,
    ) -> None:
        """Log a completed request.

        Args:
            method: HTTP method
            url: Request URL or endpoint name
            status: HTTP status code (None if the request never completed)
            duration_ms: Response time in milliseconds
            payload_size: Decoded payload blob size in bytes, if any
        """
        self.logger.info(
            "request_completed",
            event_type="request",
            method=method,
            url=url,
            status=status,
            duration_ms=duration_ms,
            payload_size=payload_size,
        )

    def log_violations(self, endpoint: str, violations: list[str]) -> None:
        """Log response-contract violations for one request."""
        self.logger.warning(
            "contract_violation",
            event_type="validation",
            endpoint=endpoint,
            violation_count=len(violations),
            violations=violations,
        )

    def log_slow_request(self, url: str, duration_ms: float, threshold_ms: float) -> None:
        """Log a request slower than the configured threshold."""
        self.logger.warning(
            "slow_request",
            event_type="performance",
            url=url,
            duration_ms=duration_ms,
            threshold_ms=threshold_ms,
        )


# Global load-test logger instance
loadtest_logger = LoadTestLogger()
