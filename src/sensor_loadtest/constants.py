"""Load-test wide constants.

This module centralizes payload size bands, value ranges, identifier spaces and
business-rule thresholds so the generator and the validator agree on them.
"""

from enum import StrEnum

# ===== Endpoints =====


class Endpoint(StrEnum):
    """Target API endpoints exercised by the load-test driver."""

    HEALTH = "/health"
    SENSOR_DATA = "/api/sensor-data"
    SENSOR_RW = "/api/sensor-rw"
    BATCH_SENSOR_RW = "/api/batch-sensor-rw"
    STATS = "/api/stats"


# ===== Sensor Identity =====


class MetricName(StrEnum):
    """Metric names a simulated device can report."""

    TEMPERATURE = "temperature"
    PRESSURE = "pressure"
    HUMIDITY = "humidity"
    VIBRATION = "vibration"
    VOLTAGE = "voltage"
    CURRENT = "current"
    POWER = "power"
    FLOW_RATE = "flow_rate"


class DeviceSpace:
    """Identifier space for simulated devices."""

    FACTORIES = ("001", "002", "003", "004", "005")
    """Factory codes"""

    DEVICES_PER_FACTORY = 100
    """Devices are numbered 001..100 inside each factory"""

    ID_PATTERN = r"^factory_\d{3}_device_\d{3}$"
    """Regex every generated device_id matches"""


PRIORITIES = (1, 2, 3)


# ===== Payload Sizing =====


class PayloadLimits:
    """Bounds applied to every generated payload blob."""

    MIN_SIZE = 256
    MAX_SIZE = 65535

    PADDING_TOKEN = "_LOAD_TEST_PADDING_DATA_"  # 24 chars
    """Repeated onto the metadata field until the target size is reached"""

    LOAD_LENGTH = 50
    LOAD_RANGE = (1, 10000)
    SEQUENCE_LENGTH = 30
    SEQUENCE_RANGE = (0.0, 1000.0)
    RANDOM_STRING_LENGTH = 200


class PayloadBands:
    """Payload target sizes per record variant."""

    SINGLE = ((512, 0.3), (2048, 0.3), (8192, 0.3), (20480, 0.1))
    """(size in bytes, probability) for single reports; covers 100%"""

    RW_RANGE = (1024, 5120)
    """Inclusive range for read-modify-write records"""

    BATCH_ITEM_RANGE = (256, 1024)
    """Half-open range for items inside a batch"""


# ===== Values =====


class ValueRanges:
    """Uniform ranges for generated metric values."""

    SINGLE = (10.0, 150.0)
    RW = (20.0, 140.0)


class BatchLimits:
    """Batch length bounds (inclusive)."""

    MIN_ITEMS = 2
    MAX_ITEMS = 5


# ===== Business Rules =====


class AlertRule:
    """Server-side alerting rule the validator checks against."""

    HIGH_VALUE_THRESHOLD = 100.0
    """Values strictly above this must raise an alert"""

    ALERT_MARKER = "High value alert"
    """Substring the server's alert text must contain"""

    ESCALATED_PRIORITY = 1
    """Priority the server assigns to high-value readings"""


VALUE_TOLERANCE = 0.01
"""Maximum accepted drift between a sent and an echoed value"""

TIMESTAMP_JITTER_MS = 3_600_000
"""Generated timestamps fall within the last hour"""
