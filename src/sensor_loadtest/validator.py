"""Response contract validators.

Each validator compares a generated request record with the server's response
and returns every violation it finds as a human-readable message. An empty
list means the response honoured the contract.

Validators never raise. A body that cannot be parsed short-circuits with a
single violation; structural and business-rule mismatches accumulate.
"""

import json
import math
from collections.abc import Mapping
from typing import Any

from sensor_loadtest.constants import VALUE_TOLERANCE, AlertRule
from sensor_loadtest.models import BatchRecord, SensorRecord, SensorRWRecord

HTTP_OK = 200
HTTP_ERROR_MIN = 400

ResponseBody = Mapping[str, Any] | str | bytes | None


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")


def parse_response_body(raw: ResponseBody) -> Mapping[str, Any] | None:
    """Parse a raw response body into a mapping.

    Already-parsed mappings pass through. Anything that is not a strict JSON
    object (invalid JSON, NaN/Infinity tokens, arrays, scalars, None) yields
    None.
    """
    if raw is None or isinstance(raw, Mapping):
        return raw
    try:
        parsed = json.loads(raw, parse_constant=_reject_constant)
    except (TypeError, ValueError):
        return None
    return parsed if isinstance(parsed, Mapping) else None


def _is_number(value: Any) -> bool:
    """Finite int or float; booleans excluded."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def _is_non_negative_number(value: Any) -> bool:
    return _is_number(value) and value >= 0


def _failure_reason(body: Mapping[str, Any]) -> str:
    return body.get("message") or "unknown error"


def _is_high_value(value: float) -> bool:
    return value > AlertRule.HIGH_VALUE_THRESHOLD


def validate_single_response(record: SensorRecord, status: int, body: ResponseBody) -> list[str]:
    """Validate a POST /api/sensor-data response.

    HTTP status violations do not stop the remaining checks; a body that
    cannot be parsed does.
    """
    violations: list[str] = []

    if status != HTTP_OK:
        violations.append(f"Sensor data response status: {status}")

    parsed = parse_response_body(body)
    if parsed is None:
        violations.append("Failed to parse sensor data response")
        return violations

    if parsed.get("status") != "success":
        violations.append(f"Sensor data response not successful: {_failure_reason(parsed)}")

    # Generator self-check on the request side
    if not record.data:
        violations.append("Missing payload data in original request")

    return violations


def validate_rw_response(
    record: SensorRWRecord,
    status: int,
    body: ResponseBody,
    *,
    expect_priority_escalation: bool = False,
) -> list[str]:
    """Validate a POST /api/sensor-rw response.

    Args:
        record: Request that was sent
        status: HTTP status code
        body: Parsed or raw response body
        expect_priority_escalation: Also require priority 1 on high-value
            readings

    Returns:
        Violation messages, empty when the response is valid
    """
    if status != HTTP_OK:
        return [f"Sensor RW response status: {status}"]

    parsed = parse_response_body(body)
    if parsed is None:
        return ["Failed to parse sensor RW response"]
    if parsed.get("status") != "success":
        return [f"Sensor RW response not successful: {_failure_reason(parsed)}"]

    violations: list[str] = []

    if parsed.get("device_id") != record.device_id:
        violations.append("Device ID mismatch in sensor RW response")

    echoed_value = parsed.get("new_value")
    if not _is_number(echoed_value) or not abs(echoed_value - record.new_value) <= VALUE_TOLERANCE:
        violations.append("New value mismatch in sensor RW response")

    if not record.data:
        violations.append("Missing payload data in original RW request")

    # Only missing alerts are flagged; an alert at or below the threshold is accepted.
    if _is_high_value(record.new_value):
        alert = parsed.get("alert")
        if not isinstance(alert, str) or AlertRule.ALERT_MARKER not in alert:
            violations.append("Missing expected alert for high value")

        if expect_priority_escalation and parsed.get("priority") != AlertRule.ESCALATED_PRIORITY:
            violations.append(
                f"Priority not escalated for high value: expected {AlertRule.ESCALATED_PRIORITY}, "
                f"got {parsed.get('priority')}"
            )

    return violations


def validate_batch_response(record: BatchRecord, status: int, body: ResponseBody) -> list[str]:
    """Validate a POST /api/batch-sensor-rw response."""
    if status != HTTP_OK:
        return [f"Batch response status: {status}"]

    parsed = parse_response_body(body)
    if parsed is None:
        return ["Failed to parse batch response"]
    if parsed.get("status") != "success":
        return [f"Batch response not successful: {_failure_reason(parsed)}"]

    violations: list[str] = []
    expected_count = len(record.data)

    total_processed = parsed.get("total_processed")
    if not _is_number(total_processed) or total_processed != expected_count:
        violations.append(
            f"Processed count mismatch: expected {expected_count}, got {total_processed}"
        )

    results = parsed.get("results")
    if not isinstance(results, list) or len(results) != expected_count:
        violations.append("Results array length mismatch")

    if not all(item.data for item in record.data):
        violations.append("Some batch items missing payload data")

    expected_alerts = sum(1 for item in record.data if _is_high_value(item.new_value))
    total_alerts = parsed.get("total_alerts")
    if not _is_number(total_alerts) or total_alerts != expected_alerts:
        violations.append(f"Alert count mismatch: expected {expected_alerts}, got {total_alerts}")

    return violations


def validate_stats_response(status: int, body: ResponseBody) -> list[str]:
    """Validate a GET /api/stats response."""
    if status != HTTP_OK:
        return [f"Stats response status: {status}"]

    parsed = parse_response_body(body)
    if parsed is None:
        return ["Failed to parse stats response"]

    violations: list[str] = []

    if not _is_non_negative_number(parsed.get("total_records")):
        violations.append("Invalid total_records in stats response")

    if not isinstance(parsed.get("priority_stats"), Mapping):
        violations.append("Invalid priority_stats in stats response")

    if not _is_non_negative_number(parsed.get("recent_24h_count")):
        violations.append("Invalid recent_24h_count in stats response")

    return violations


def validate_health_response(status: int, body: ResponseBody) -> list[str]:
    """Validate a GET /health response."""
    if status != HTTP_OK:
        return [f"Health check status: {status}"]

    parsed = parse_response_body(body)
    if parsed is None:
        return ["Failed to parse health check response"]

    if parsed.get("status") != "healthy":
        return [f"Health check reports unhealthy status: {parsed.get('status')}"]
    return []


def check_performance(
    url: str,
    status: int | None,
    duration_ms: float,
    slow_threshold_ms: float,
) -> list[str]:
    """Flag slow requests and HTTP error statuses.

    Args:
        url: Request URL or endpoint name
        status: HTTP status code (None or 0 when no response arrived)
        duration_ms: Response time in milliseconds
        slow_threshold_ms: Durations above this are reported

    Returns:
        Violation messages
    """
    violations: list[str] = []

    if duration_ms > slow_threshold_ms:
        violations.append(f"Slow request detected: {duration_ms:.0f}ms for {url}")

    if status is not None and status >= HTTP_ERROR_MIN:
        violations.append(f"HTTP error: {status} for {url}")

    return violations
