"""Synthetic sensor record generator.

Produces request bodies with a controlled statistical shape: uniform field
draws plus a base64 payload blob padded up to a size band chosen per record
variant.

Example:
    >>> import random
    >>> generator = SensorDataGenerator(random.Random(42))
    >>> record = generator.generate_rw_record()
    >>> payload_size(record.data) >= 1024
    True
"""

import base64
import binascii
import json
import math
import random
import string
import time
from datetime import UTC, datetime, timedelta
from typing import Any

from sensor_loadtest.config import settings
from sensor_loadtest.constants import (
    PRIORITIES,
    TIMESTAMP_JITTER_MS,
    BatchLimits,
    DeviceSpace,
    MetricName,
    PayloadBands,
    PayloadLimits,
    ValueRanges,
)
from sensor_loadtest.exceptions import PayloadDecodeError
from sensor_loadtest.models import BatchRecord, SensorRecord, SensorRWRecord

RANDOM_STRING_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def clamp_payload_size(target_size: int) -> int:
    """Clamp a requested payload size into the supported range."""
    return max(PayloadLimits.MIN_SIZE, min(PayloadLimits.MAX_SIZE, target_size))


def _to_iso(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _serialize(payload: dict[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"))


class SensorDataGenerator:
    """Random sensor record factory.

    The random source is injected so tests can pass a seeded ``random.Random``.
    Instances hold no other state and may be shared between simulated users.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    # ----- primitives -----

    def random_float(self, low: float, high: float) -> float:
        """Uniform float in [low, high] rounded to 2 decimals."""
        return round(self.rng.uniform(low, high), 2)

    def generate_random_string(self, length: int) -> str:
        return "".join(self.rng.choices(RANDOM_STRING_ALPHABET, k=length))

    def generate_device_id(self) -> str:
        factory = self.rng.choice(DeviceSpace.FACTORIES)
        device = self.rng.randint(1, DeviceSpace.DEVICES_PER_FACTORY)
        return f"factory_{factory}_device_{device:03d}"

    def generate_timestamp(self) -> str:
        """Current UTC time minus a random offset within the last hour."""
        offset_ms = self.rng.randrange(TIMESTAMP_JITTER_MS)
        return _to_iso(datetime.now(UTC) - timedelta(milliseconds=offset_ms))

    def _metric_name(self) -> MetricName:
        return self.rng.choice(list(MetricName))

    def _priority(self) -> int:
        return self.rng.choice(PRIORITIES)

    # ----- payload -----

    def generate_payload(self, target_size: int) -> str:
        """Build a base64 payload blob of at least ``target_size`` bytes.

        The size is clamped to [256, 65535] first. When the serialized object
        falls short, the padding token is repeated onto ``metadata`` and cut to
        the exact deficit, so the decoded length never undershoots the target.

        Args:
            target_size: Requested decoded size in bytes

        Returns:
            Base64-encoded compact JSON
        """
        target_size = clamp_payload_size(target_size)
        load_low, load_high = PayloadLimits.LOAD_RANGE
        seq_low, seq_high = PayloadLimits.SEQUENCE_RANGE

        payload: dict[str, Any] = {
            "load": [self.rng.randint(load_low, load_high) for _ in range(PayloadLimits.LOAD_LENGTH)],
            "timestamp": _to_iso(datetime.now(UTC)),
            "size": target_size,
            "random": self.generate_random_string(PayloadLimits.RANDOM_STRING_LENGTH),
            "sequence": [
                self.random_float(seq_low, seq_high) for _ in range(PayloadLimits.SEQUENCE_LENGTH)
            ],
            "metadata": f"generated_at_{int(time.time() * 1000)}_device_simulation_data_for_load_testing",
        }

        serialized = _serialize(payload)

        deficit = target_size - len(serialized)
        if deficit > 0:
            token = PayloadLimits.PADDING_TOKEN
            padding = token * math.ceil(deficit / len(token))
            payload["metadata"] += padding[:deficit]
            serialized = _serialize(payload)

        return base64.b64encode(serialized.encode("utf-8")).decode("ascii")

    def pick_single_payload_size(self) -> int:
        """Draw a payload size from the single-report bands."""
        sizes = [size for size, _ in PayloadBands.SINGLE]
        weights = [weight for _, weight in PayloadBands.SINGLE]
        return self.rng.choices(sizes, weights=weights)[0]

    # ----- records -----

    def generate_single_record(self) -> SensorRecord:
        value_low, value_high = ValueRanges.SINGLE
        return SensorRecord(
            timestamp=self.generate_timestamp(),
            device_id=self.generate_device_id(),
            metric_name=self._metric_name(),
            value=self.random_float(value_low, value_high),
            priority=self._priority(),
            data=self.generate_payload(self.pick_single_payload_size()),
        )

    def generate_rw_record(self, payload_size: int | None = None) -> SensorRWRecord:
        """Generate a read-modify-write record.

        Args:
            payload_size: Payload target size; drawn from [1024, 5120] when omitted
        """
        if payload_size is None:
            payload_size = self.rng.randint(*PayloadBands.RW_RANGE)
        value_low, value_high = ValueRanges.RW
        return SensorRWRecord(
            device_id=self.generate_device_id(),
            metric_name=self._metric_name(),
            new_value=self.random_float(value_low, value_high),
            timestamp=self.generate_timestamp(),
            priority=self._priority(),
            data=self.generate_payload(payload_size),
        )

    def generate_batch_record(self) -> BatchRecord:
        """Generate 2-5 RW records with smaller per-item payloads."""
        batch_size = self.rng.randint(BatchLimits.MIN_ITEMS, BatchLimits.MAX_ITEMS)
        return BatchRecord(
            data=[
                self.generate_rw_record(payload_size=self.rng.randrange(*PayloadBands.BATCH_ITEM_RANGE))
                for _ in range(batch_size)
            ]
        )


def decode_payload(blob: str) -> dict[str, Any]:
    """Decode a payload blob back to its JSON object.

    Raises:
        PayloadDecodeError: blob is not base64 or does not hold a JSON object
    """
    try:
        decoded = json.loads(base64.b64decode(blob, validate=True))
    except (binascii.Error, ValueError) as e:
        raise PayloadDecodeError(f"Payload blob could not be decoded: {e}") from e

    if not isinstance(decoded, dict):
        raise PayloadDecodeError("Payload blob does not hold a JSON object")
    return decoded


def payload_size(blob: str) -> int:
    """Decoded byte length of a payload blob (0 for invalid or non-ASCII base64)."""
    try:
        return len(base64.b64decode(blob, validate=True))
    except (binascii.Error, ValueError):
        return 0


default_generator = SensorDataGenerator(random.Random(settings.random_seed))


def generate_payload(target_size: int) -> str:
    return default_generator.generate_payload(target_size)


def generate_single_record() -> SensorRecord:
    return default_generator.generate_single_record()


def generate_rw_record() -> SensorRWRecord:
    return default_generator.generate_rw_record()


def generate_batch_record() -> BatchRecord:
    return default_generator.generate_batch_record()
