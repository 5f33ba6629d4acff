"""Use case: describe the caller's own request."""

import logging
from typing import TYPE_CHECKING

from myip_service.application.clock import Clock, iso_timestamp, utc_now
from myip_service.domain.models import (
    NOT_AVAILABLE,
    ClientContext,
    ClientReport,
    ConnectionInfo,
    EchoedHeaders,
    ErrorDetails,
    HandlerResult,
)

if TYPE_CHECKING:
    from myip_service.domain.ports import AgentParser, GeoLocator

logger = logging.getLogger(__name__)


class ClientInfoService:
    """Builds a ClientReport from a ClientContext and the two lookup ports."""

    def __init__(
        self,
        geo_locator: "GeoLocator",
        agent_parser: "AgentParser",
        clock: Clock = utc_now,
    ) -> None:
        """Initialize with the geolocation and user agent lookups.

        Args:
            geo_locator: IP to location lookup.
            agent_parser: User-Agent parser.
            clock: Source of the report timestamp.
        """
        self._geo_locator = geo_locator
        self._agent_parser = agent_parser
        self._clock = clock

    def describe(self, context: ClientContext) -> HandlerResult[ClientReport]:
        """Describe the client. Faults become an internal error result, never an exception."""
        try:
            report = self._build_report(context)
        except Exception:
            logger.exception("Failed to build client report for %s %s", context.method, context.url)
            return HandlerResult.fail(ErrorDetails.internal())
        return HandlerResult.ok(report)

    def _build_report(self, context: ClientContext) -> ClientReport:
        return ClientReport(
            timestamp=iso_timestamp(self._clock()),
            ip_address=context.ip,
            location=self._geo_locator.lookup(context.ip),
            user_agent=self._agent_parser.parse(context.user_agent),
            connection=ConnectionInfo(
                secure=context.secure,
                protocol=context.scheme,
                host=context.host,
                origin=context.origin or NOT_AVAILABLE,
            ),
            headers=_echoed_headers(context),
            raw_headers=dict(context.headers),
            method=context.method,
            url=context.url,
            query=dict(context.query),
        )


def _echoed_headers(context: ClientContext) -> EchoedHeaders:
    """Pick the individually reported headers, substituting N/A for missing ones."""
    return EchoedHeaders(
        accept_language=context.header("accept-language") or NOT_AVAILABLE,
        accept_encoding=context.header("accept-encoding") or NOT_AVAILABLE,
        connection=context.header("connection") or NOT_AVAILABLE,
        cache_control=context.header("cache-control") or NOT_AVAILABLE,
    )
