"""Geolocation port."""

from typing import Protocol

from myip_service.domain.models.geo_record import GeoRecord


class GeoLocator(Protocol):
    """Port for mapping an IP address to an approximate location."""

    def lookup(self, ip: str | None) -> GeoRecord | None:
        """Return the location of ``ip``, or None when it is unknown or invalid."""
        ...

    def close(self) -> None:
        """Release any dataset handles."""
        ...
