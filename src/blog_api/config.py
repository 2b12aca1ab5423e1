"""Application configuration via environment variables."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class Settings(BaseSettings):
    """Service configuration loaded from environment variables."""

    model_config = {"env_prefix": ""}

    # Server
    host: str = Field(default="0.0.0.0", description="Server bind host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server bind port")
    log_level: LogLevel = Field(default="info", description="Log level")

    # Store
    seed_data: bool = Field(
        default=True, description="Load the sample posts into the store on startup"
    )

    # Liveness
    heartbeat_path: str = Field(default="/up", description="Path answered by the heartbeat")

    # Telemetry (optional — export is disabled without an endpoint)
    otel_exporter_otlp_endpoint: str | None = Field(
        default=None, description="OTLP gRPC collector endpoint"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v

    @field_validator("heartbeat_path")
    @classmethod
    def _validate_heartbeat_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"HEARTBEAT_PATH must start with '/': {v!r}")
        return v
