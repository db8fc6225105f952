"""Configuration for the weather observation exporter"""
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Environment-based settings validated by pydantic"""

    # Server settings
    metrics_port: int = Field(default=9100, ge=1, le=65535, description="HTTP server port")
    metrics_host: str = Field(default="0.0.0.0", description="HTTP server host")

    # Upstream feed
    upstream_base_url: str = Field(default="https://xmlweather.vedur.is/", description="Observation feed base URL")
    upstream_timeout: Optional[float] = Field(default=None, gt=0, description="Upstream timeout in seconds (unset = no timeout)")

    # Metric extraction
    non_numeric_policy: Literal["passthrough", "drop", "error"] = Field(
        default="passthrough",
        description="What to do with values that do not parse as numbers"
    )
    station_label: bool = Field(default=False, description="Attach a station label to every sample")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")
    enable_request_logging: bool = Field(default=True, description="Enable HTTP request logging")

    # Service settings
    service_name: str = Field(default="vedur-observations-exporter", description="Service name")
    service_version: str = Field(default="1.0.0", description="Service version")

    class Config:
        env_prefix = ""
        case_sensitive = False

    @validator('log_level', pre=True)
    def normalize_log_level(cls, v):
        """Accept lower-case level names from the environment"""
        if isinstance(v, str):
            return v.upper()
        return v

    @validator('log_file')
    def ensure_log_directory(cls, v):
        """Ensure the log file's parent directory exists"""
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @validator('upstream_base_url')
    def validate_upstream_base_url(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError("UPSTREAM_BASE_URL must be an http(s) URL")
        return v

    def observation_url(self, station: str) -> str:
        """Build the upstream observation URL for a station.

        The station identifier is interpolated as-is, without escaping.
        """
        return f"{self.upstream_base_url}?op_w=xml&type=obs&lang=en&view=xml&ids={station}"
