"""Sensor record model tests."""

import pytest
from pydantic import ValidationError

from sensor_loadtest.constants import AlertRule, Endpoint, MetricName, PayloadBands
from sensor_loadtest.models import BatchRecord, SensorRecord


class TestSensorRecord:
    """SensorRecord field constraint tests."""

    def record_fields(self, **overrides):
        fields = {
            "timestamp": "2024-05-01T12:00:00.000Z",
            "device_id": "factory_001_device_001",
            "metric_name": "humidity",
            "value": 10.0,
            "priority": 1,
            "data": "e30=",
        }
        fields.update(overrides)
        return fields

    def test_metric_name_coerced(self):
        """Metric names are parsed into the enum."""
        record = SensorRecord(**self.record_fields())

        assert record.metric_name is MetricName.HUMIDITY
        assert record.to_request_body()["metric_name"] == "humidity"

    @pytest.mark.parametrize("device_id", ["factory_1_device_001", "device_001", "factory_001_device_0001"])
    def test_device_id_pattern(self, device_id):
        """Malformed device ids are rejected."""
        with pytest.raises(ValidationError):
            SensorRecord(**self.record_fields(device_id=device_id))

    @pytest.mark.parametrize("priority", [0, 4])
    def test_priority_range(self, priority):
        """Priority must be 1, 2 or 3."""
        with pytest.raises(ValidationError):
            SensorRecord(**self.record_fields(priority=priority))


class TestBatchRecord:
    """BatchRecord length constraint tests."""

    def test_too_short(self, rw_record):
        """A single-item batch is rejected."""
        with pytest.raises(ValidationError):
            BatchRecord(data=[rw_record])

    def test_too_long(self, rw_record):
        """More than five items are rejected."""
        with pytest.raises(ValidationError):
            BatchRecord(data=[rw_record] * 6)

    def test_request_body(self, batch_record):
        """Batch request body nests item bodies under data."""
        body = batch_record.to_request_body()

        assert len(body["data"]) == 3
        assert body["data"][0]["new_value"] == 150.0


class TestConstants:
    """Shared constant tests."""

    def test_single_bands_cover_full_distribution(self):
        """Single-report bands sum to 100%."""
        assert sum(weight for _, weight in PayloadBands.SINGLE) == pytest.approx(1.0)

    def test_metric_names(self):
        """Eight metric names are available."""
        assert len(MetricName) == 8

    def test_endpoints(self):
        """Endpoint paths."""
        assert Endpoint.SENSOR_RW == "/api/sensor-rw"
        assert Endpoint.BATCH_SENSOR_RW == "/api/batch-sensor-rw"

    def test_alert_rule(self):
        """Alert threshold and marker."""
        assert AlertRule.HIGH_VALUE_THRESHOLD == 100.0
        assert AlertRule.ALERT_MARKER == "High value alert"
