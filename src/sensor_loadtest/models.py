"""Sensor record models.

Request bodies sent to the ingestion API. A record is built fresh for each
simulated request and dropped once its response has been validated.
"""

from typing import Any

from pydantic import BaseModel, Field

from sensor_loadtest.constants import BatchLimits, DeviceSpace, MetricName


class _Record(BaseModel):
    def to_request_body(self) -> dict[str, Any]:
        """JSON-ready dict for the HTTP request body."""
        return self.model_dump(mode="json")


class SensorRecord(_Record):
    """Single sensor report (POST /api/sensor-data).

    Attributes:
        timestamp: ISO-8601 UTC reading time
        device_id: factory_XXX_device_YYY
        metric_name: Reported metric
        value: Reading value
        priority: 1 (highest) to 3
        data: Base64-encoded payload blob
    """

    timestamp: str
    device_id: str = Field(pattern=DeviceSpace.ID_PATTERN)
    metric_name: MetricName
    value: float
    priority: int = Field(ge=1, le=3)
    data: str


class SensorRWRecord(_Record):
    """Read-modify-write sensor update (POST /api/sensor-rw).

    Same shape as SensorRecord; ``new_value`` replaces ``value``.
    """

    device_id: str = Field(pattern=DeviceSpace.ID_PATTERN)
    metric_name: MetricName
    new_value: float
    timestamp: str
    priority: int = Field(ge=1, le=3)
    data: str


class BatchRecord(_Record):
    """Batch of read-modify-write updates (POST /api/batch-sensor-rw)."""

    data: list[SensorRWRecord] = Field(
        min_length=BatchLimits.MIN_ITEMS, max_length=BatchLimits.MAX_ITEMS
    )
