"""Main entry point for the client info service."""

import asyncio
import logging
import sys

from maxminddb import InvalidDatabaseError

from myip_service.adapters.config import AppConfig
from myip_service.adapters.geoip import create_geo_locator
from myip_service.adapters.useragent import UserAgentsParser
from myip_service.adapters.web import StarletteWebAdapter
from myip_service.application.services import (
    ClientInfoService,
    DiagnosticService,
    SpeedtestService,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr in the service's standard format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    try:
        geo_locator = create_geo_locator(config)
    except (OSError, ValueError, InvalidDatabaseError) as e:
        logger.error(f"Could not open GeoIP database: {e}")
        sys.exit(1)

    client_info_service = ClientInfoService(geo_locator, UserAgentsParser())
    diagnostic_service = DiagnosticService()

    speedtest_service: SpeedtestService | None = None
    if config.speedtest_enabled:
        speedtest_service = SpeedtestService(
            download_size_bytes=config.download_size_bytes,
            upload_max_bytes=config.upload_max_bytes,
        )
        logger.info(
            f"Speed test enabled: download {config.download_size_bytes} bytes, "
            f"upload limit {config.upload_max_bytes} bytes"
        )

    web_adapter = StarletteWebAdapter(
        config,
        client_info_service,
        diagnostic_service,
        speedtest_service,
        geo_locator=geo_locator,
    )

    try:
        await web_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await web_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
