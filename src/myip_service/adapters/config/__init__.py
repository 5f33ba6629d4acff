"""Configuration adapters."""

from myip_service.adapters.config.app_config import (
    DEFAULT_CLIENT_IP_HEADERS,
    MIB,
    AppConfig,
)

__all__ = ["DEFAULT_CLIENT_IP_HEADERS", "MIB", "AppConfig"]
