"""Route table for the HTTP surface.

Routes are matched in order. Static assets come after every API route, and
anything still unmatched falls through to the 404 handler.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import BaseRoute, Route

from myip_service.domain.models import ErrorDetails

from .client_info import get_client_context_from_scope
from .responses import NO_CACHE_HEADERS, error_response

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from starlette.requests import Request

    from myip_service.adapters.config import AppConfig
    from myip_service.domain.contracts import StaticFileServerProtocol
    from myip_service.domain.ports import ClientInfoProvider, DiagnosticProvider, SpeedtestProvider

logger = logging.getLogger(__name__)


def _declared_length(request: Request) -> int | None:
    value = request.headers.get("content-length")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _guarded(
    endpoint: Callable[[Request], Awaitable[Response]],
) -> Callable[[Request], Awaitable[Response]]:
    """Answer unexpected faults with the uniform 500 body.

    Runs inside the middleware stack, so error responses still carry the
    security and CORS headers.
    """

    @functools.wraps(endpoint)
    async def guarded_endpoint(request: Request) -> Response:
        try:
            return await endpoint(request)
        except Exception:
            logger.exception(f"Unhandled error serving {request.method} {request.url.path}")
            return error_response(ErrorDetails.internal())

    return guarded_endpoint


def build_routes(
    config: AppConfig,
    client_info_service: ClientInfoProvider,
    diagnostic_service: DiagnosticProvider,
    speedtest_service: SpeedtestProvider | None,
    static_file_server: StaticFileServerProtocol,
) -> list[BaseRoute]:
    """Assemble the ordered route table.

    Args:
        config: Application configuration.
        client_info_service: Builds /api/myip reports.
        diagnostic_service: Builds /api/test acknowledgments.
        speedtest_service: Speed test use cases, or None to leave those routes out.
        static_file_server: Provides the page and asset routes.
    """
    trusted_ip_headers = list(config.client_ip_headers)

    async def my_ip(request: Request) -> Response:
        context = get_client_context_from_scope(request.scope, trusted_ip_headers)
        result = client_info_service.describe(context)
        if result.error is not None:
            return error_response(result.error)
        return JSONResponse(result.unwrap().to_payload())

    async def api_test(_request: Request) -> Response:
        return JSONResponse(diagnostic_service.acknowledge().model_dump())

    routes: list[BaseRoute] = [
        Route("/api/myip", _guarded(my_ip), methods=["GET"]),
        *static_file_server.page_routes(),
        Route("/api/test", _guarded(api_test), methods=["GET"]),
    ]

    if speedtest_service is not None:
        routes.extend(_speedtest_routes(speedtest_service))
    else:
        logger.info("Speed test endpoints disabled")

    routes.extend(static_file_server.asset_routes())
    return routes


def _speedtest_routes(speedtest_service: SpeedtestProvider) -> list[BaseRoute]:
    async def ping(_request: Request) -> Response:
        return PlainTextResponse(speedtest_service.ping(), headers=NO_CACHE_HEADERS)

    async def download(_request: Request) -> Response:
        payload = speedtest_service.download_payload()
        # Response derives Content-Length from the body, so the two always agree.
        return Response(
            content=payload.data,
            media_type="application/octet-stream",
            headers=NO_CACHE_HEADERS,
        )

    async def upload(request: Request) -> Response:
        result = await speedtest_service.receive_upload(
            request.stream(), declared_length=_declared_length(request)
        )
        if result.error is not None:
            return error_response(result.error)
        return JSONResponse(result.unwrap().to_payload())

    return [
        Route("/api/speedtest/ping", _guarded(ping), methods=["GET"]),
        Route("/api/speedtest/download", _guarded(download), methods=["GET"]),
        Route("/api/speedtest/upload", _guarded(upload), methods=["POST"]),
    ]
