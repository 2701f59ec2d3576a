"""pytest fixtures."""

import random
from typing import Any

import pytest
from dotenv import load_dotenv

# Load test environment variables before importing settings
load_dotenv(".env.test", override=True)

from sensor_loadtest.constants import MetricName
from sensor_loadtest.generator import SensorDataGenerator
from sensor_loadtest.models import BatchRecord, SensorRecord, SensorRWRecord

SAMPLE_BLOB = "eyJsb2FkIjpbMV19"  # base64 of {"load":[1]}


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def generator(seeded_rng: random.Random) -> SensorDataGenerator:
    """Generator backed by the seeded random source."""
    return SensorDataGenerator(seeded_rng)


def make_rw_record(new_value: float = 55.0, **overrides: Any) -> SensorRWRecord:
    """Build a read-modify-write record with fixed field values."""
    fields: dict[str, Any] = {
        "device_id": "factory_001_device_042",
        "metric_name": MetricName.TEMPERATURE,
        "new_value": new_value,
        "timestamp": "2024-05-01T12:00:00.000Z",
        "priority": 2,
        "data": SAMPLE_BLOB,
    }
    fields.update(overrides)
    return SensorRWRecord(**fields)


@pytest.fixture
def single_record() -> SensorRecord:
    """Single sensor report with fixed field values."""
    return SensorRecord(
        timestamp="2024-05-01T12:00:00.000Z",
        device_id="factory_002_device_007",
        metric_name=MetricName.PRESSURE,
        value=42.5,
        priority=3,
        data=SAMPLE_BLOB,
    )


@pytest.fixture
def rw_record_factory():
    """Factory for read-modify-write records with overridable fields."""
    return make_rw_record


@pytest.fixture
def rw_record() -> SensorRWRecord:
    """Read-modify-write record below the alert threshold."""
    return make_rw_record()


@pytest.fixture
def batch_record() -> BatchRecord:
    """Batch of three records, one of them above the alert threshold."""
    return BatchRecord(
        data=[
            make_rw_record(new_value=150.0),
            make_rw_record(new_value=40.0, device_id="factory_003_device_001"),
            make_rw_record(new_value=99.99, device_id="factory_004_device_100"),
        ]
    )
