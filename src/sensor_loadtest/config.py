"""Load-test settings.

All values come from environment variables with the ``LOADTEST_`` prefix or
from a local ``.env`` file.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoadTestSettings(BaseSettings):
    """Driver and toolkit settings."""

    # Environment
    env: str = Field(default="development", description="Environment (development/test/production)")

    # Target
    host: str = Field(default="http://localhost:8080", description="Base URL of the ingestion API")

    # Per-request latency above which a request is reported as slow
    slow_request_ms: float = Field(default=1000.0, gt=0, description="Slow request threshold (ms)")

    # Reproducible runs
    random_seed: int | None = Field(
        default=None, description="Seed for the default record generator (None = unseeded)"
    )

    # Think time between tasks, handed to locust.between()
    wait_min_seconds: float = Field(default=0.0, ge=0)
    wait_max_seconds: float = Field(default=2.0, ge=0)

    log_payload_sizes: bool = Field(
        default=True, description="Log decoded payload size with every request"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOADTEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_wait_window(self):
        """Think-time window must not be inverted."""
        if self.wait_min_seconds > self.wait_max_seconds:
            raise ValueError(
                "wait_min_seconds must not exceed wait_max_seconds. "
                f"Got {self.wait_min_seconds} > {self.wait_max_seconds}"
            )
        return self


settings = LoadTestSettings()
