"""12-factor configuration adapter using environment variables."""

import json
import logging
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

MIB = 1024 * 1024

# Checked in order; the first header holding a valid IP wins.
DEFAULT_CLIENT_IP_HEADERS = [
    "x-client-ip",
    "x-forwarded-for",
    "cf-connecting-ip",
    "fastly-client-ip",
    "true-client-ip",
    "x-real-ip",
    "x-cluster-client-ip",
    "x-forwarded",
    "forwarded-for",
    "forwarded",
]


def _split_list(value: Any) -> Any:
    """Accept either a JSON array or a comma-separated string for list settings."""
    if not isinstance(value, str):
        return value
    stripped = value.strip()
    if stripped.startswith("["):
        return json.loads(stripped)
    return [item.strip() for item in stripped.split(",") if item.strip()]


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root log level")

    # Static pages
    static_dir: str | None = Field(
        default=None,
        description="Directory holding index.html and about.html (defaults to ./public)",
    )

    # Geolocation datasets (MaxMind .mmdb files)
    geoip_city_database: str | None = Field(
        default=None, description="Path to a GeoLite2/GeoIP2 City database"
    )
    geoip_asn_database: str | None = Field(
        default=None,
        description="Optional path to a GeoLite2 ASN database, used to report the organization",
    )

    # Client IP resolution
    client_ip_headers: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_CLIENT_IP_HEADERS),
        description="Forwarding headers trusted for the client IP, in order of precedence",
    )

    # Speed test
    speedtest_enabled: bool = Field(default=True, description="Register the speed test endpoints")
    download_size_bytes: int = Field(
        default=5 * MIB, description="Exact size of the download test payload in bytes"
    )
    upload_max_bytes: int = Field(
        default=50 * MIB, description="Largest accepted upload test body in bytes"
    )

    # CORS
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"], description="Origins allowed by CORS"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @field_validator("client_ip_headers", "cors_allow_origins", mode="before")
    @classmethod
    def parse_list(cls, v: Any) -> Any:
        """Parse list settings given as JSON or comma-separated strings."""
        return _split_list(v)

    @field_validator("client_ip_headers")
    @classmethod
    def normalize_headers(cls, v: list[str]) -> list[str]:
        """Header names are matched lower-cased."""
        return [name.lower() for name in v]

    @field_validator("download_size_bytes", "upload_max_bytes")
    @classmethod
    def validate_positive_size(cls, v: int) -> int:
        """Validate payload sizes are positive."""
        if v <= 0:
            raise ValueError("size must be a positive number of bytes")
        return v

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any .env file."""
        return cls(_env_file=None, **overrides)
