"""Starlette web adapter serving the client info and speed test endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware

from myip_service.adapters.config import AppConfig
from myip_service.domain.ports import ServerAdapter

from .responses import internal_error_response, not_found_response
from .routes import build_routes
from .security_headers import SecurityHeadersMiddleware
from .servers import StaticFileServer, find_static_dir

if TYPE_CHECKING:
    from myip_service.domain.contracts import StaticFileServerProtocol
    from myip_service.domain.ports import (
        ClientInfoProvider,
        DiagnosticProvider,
        GeoLocator,
        SpeedtestProvider,
    )

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig,
    client_info_service: ClientInfoProvider,
    diagnostic_service: DiagnosticProvider,
    speedtest_service: SpeedtestProvider | None = None,
    static_file_server: StaticFileServerProtocol | None = None,
) -> Starlette:
    """Build the ASGI application.

    Unmatched paths and unsupported methods both answer with the 404 body;
    uncaught exceptions answer with the uniform 500 body.
    """
    if static_file_server is None:
        static_file_server = StaticFileServer(find_static_dir(config.static_dir))

    routes = build_routes(
        config,
        client_info_service,
        diagnostic_service,
        speedtest_service,
        static_file_server,
    )

    return Starlette(
        routes=routes,
        middleware=[
            Middleware(SecurityHeadersMiddleware),
            Middleware(
                CORSMiddleware,
                allow_origins=list(config.cors_allow_origins),
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        ],
        exception_handlers={
            404: not_found_response,
            405: not_found_response,
            Exception: internal_error_response,
        },
    )


class StarletteWebAdapter(ServerAdapter):
    """Runs the Starlette application under uvicorn."""

    def __init__(
        self,
        config: AppConfig,
        client_info_service: ClientInfoProvider,
        diagnostic_service: DiagnosticProvider,
        speedtest_service: SpeedtestProvider | None = None,
        geo_locator: GeoLocator | None = None,
    ) -> None:
        """Initialize the web adapter.

        Args:
            config: Application configuration.
            client_info_service: Service behind /api/myip.
            diagnostic_service: Service behind /api/test.
            speedtest_service: Service behind /api/speedtest/*, or None when disabled.
            geo_locator: Locator whose dataset handles are closed on stop.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(getattr(client_info_service, "describe", None)):
            raise TypeError("client_info_service must provide describe()")

        self.config = config
        self.client_info_service = client_info_service
        self.diagnostic_service = diagnostic_service
        self.speedtest_service = speedtest_service
        self.geo_locator = geo_locator
        self._server: Any | None = None

    def build_app(self) -> Starlette:
        return create_app(
            self.config,
            self.client_info_service,
            self.diagnostic_service,
            self.speedtest_service,
        )

    async def start(self) -> None:
        """Start the web server and serve until shutdown."""
        import uvicorn

        app = self.build_app()
        server_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Server listening on http://{self.config.host}:{self.config.port}")

        try:
            await self._server.serve()
        finally:
            self._close_datasets()

    async def stop(self) -> None:
        """Stop the web server.

        Dataset handles are closed by start() once in-flight requests finish.
        """
        if self._server:
            self._server.should_exit = True

    def _close_datasets(self) -> None:
        if self.geo_locator is not None:
            self.geo_locator.close()
            self.geo_locator = None
