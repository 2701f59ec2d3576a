"""sensor-loadtest: data generation and response validation for load-testing
a time-series sensor ingestion API.

The load-generation host (Locust) owns scheduling, HTTP and reporting. This
package supplies the request bodies it sends and the contract checks it runs
on every response.

Main components:
    - SensorDataGenerator: randomized single, RW and batch records
    - validate_*_response: response contract validators returning violations
    - LoadTestSettings: LOADTEST_* environment settings

Example:
    >>> from sensor_loadtest import generate_rw_record, validate_rw_response
    >>> record = generate_rw_record()
    >>> body = {"status": "success", "device_id": record.device_id, "new_value": record.new_value}
    >>> violations = validate_rw_response(record, 200, body)
"""

from sensor_loadtest.config import LoadTestSettings
from sensor_loadtest.constants import Endpoint, MetricName
from sensor_loadtest.exceptions import LoadTestError, PayloadDecodeError
from sensor_loadtest.generator import (
    SensorDataGenerator,
    decode_payload,
    generate_batch_record,
    generate_payload,
    generate_rw_record,
    generate_single_record,
    payload_size,
)
from sensor_loadtest.models import BatchRecord, SensorRecord, SensorRWRecord
from sensor_loadtest.validator import (
    check_performance,
    parse_response_body,
    validate_batch_response,
    validate_health_response,
    validate_rw_response,
    validate_single_response,
    validate_stats_response,
)

__all__ = [
    "SensorDataGenerator",
    "generate_payload",
    "generate_single_record",
    "generate_rw_record",
    "generate_batch_record",
    "decode_payload",
    "payload_size",
    "SensorRecord",
    "SensorRWRecord",
    "BatchRecord",
    "MetricName",
    "Endpoint",
    "validate_single_response",
    "validate_rw_response",
    "validate_batch_response",
    "validate_stats_response",
    "validate_health_response",
    "check_performance",
    "parse_response_body",
    "LoadTestSettings",
    "LoadTestError",
    "PayloadDecodeError",
]
