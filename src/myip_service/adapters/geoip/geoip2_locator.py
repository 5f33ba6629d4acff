"""Geolocation adapter backed by local MaxMind databases."""

from __future__ import annotations

import ipaddress
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import geoip2.database
from geoip2.errors import AddressNotFoundError

from myip_service.domain.models import GeoRecord

if TYPE_CHECKING:
    from myip_service.adapters.config import AppConfig
    from myip_service.domain.ports import GeoLocator

logger = logging.getLogger(__name__)


def normalize_ip(ip: str | None) -> str | None:
    """Return a canonical IP string, unwrapping IPv4-mapped IPv6, or None if invalid."""
    if not ip:
        return None
    try:
        address = ipaddress.ip_address(ip.strip())
    except ValueError:
        return None
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is not None:
        return str(address.ipv4_mapped)
    return str(address)


def _network_bounds(network: Any) -> tuple[str, str] | None:
    """First and last address of a matched network."""
    if network is None:
        return None
    return str(network.network_address), str(network.broadcast_address)


class NullGeoLocator:
    """Locator used when no dataset is configured. Never finds anything."""

    def lookup(self, ip: str | None) -> GeoRecord | None:
        return None

    def close(self) -> None:
        return None


class GeoIP2Locator:
    """Looks up IP addresses in a City database and, optionally, an ASN database."""

    def __init__(self, city_reader: Any, asn_reader: Any | None = None) -> None:
        """Initialize with already opened readers.

        Args:
            city_reader: A ``geoip2.database.Reader`` for a City database.
            asn_reader: Optional ``geoip2.database.Reader`` for an ASN database.
        """
        self._city_reader = city_reader
        self._asn_reader = asn_reader

    @classmethod
    def open(cls, city_path: str, asn_path: str | None = None) -> GeoIP2Locator:
        """Open the database files. Raises if a file is missing or corrupt."""
        city_reader = geoip2.database.Reader(city_path)
        asn_reader = geoip2.database.Reader(asn_path) if asn_path else None
        return cls(city_reader, asn_reader)

    def lookup(self, ip: str | None) -> GeoRecord | None:
        """Return the location for ``ip``; None for invalid or unknown addresses."""
        address = normalize_ip(ip)
        if address is None:
            return None
        try:
            city = self._city_reader.city(address)
        except (AddressNotFoundError, ValueError):
            return None

        subdivision = city.subdivisions.most_specific
        location = city.location
        coordinates = None
        if location.latitude is not None and location.longitude is not None:
            coordinates = (location.latitude, location.longitude)

        return GeoRecord(
            country=city.country.iso_code or "",
            region=subdivision.iso_code or "",
            city=city.city.name or "",
            timezone=location.time_zone,
            coordinates=coordinates,
            metro=location.metro_code,
            ip_range=_network_bounds(city.traits.network),
            org=self._lookup_org(address),
        )

    def _lookup_org(self, address: str) -> str | None:
        if self._asn_reader is None:
            return None
        try:
            asn = self._asn_reader.asn(address)
        except (AddressNotFoundError, ValueError):
            return None
        return asn.autonomous_system_organization

    def close(self) -> None:
        """Close the database readers."""
        self._city_reader.close()
        if self._asn_reader is not None:
            self._asn_reader.close()


def create_geo_locator(config: AppConfig) -> GeoLocator:
    """Build the locator described by the configuration.

    Without a City database every lookup misses, which is a valid outcome.
    A configured path that does not exist is reported and treated the same way.
    """
    if not config.geoip_city_database:
        logger.warning("GEOIP_CITY_DATABASE not set, geolocation lookups are disabled")
        return NullGeoLocator()

    city_path = Path(config.geoip_city_database)
    if not city_path.exists():
        logger.warning(f"GeoIP City database not found at {city_path}, lookups are disabled")
        return NullGeoLocator()

    asn_path: str | None = None
    if config.geoip_asn_database:
        if Path(config.geoip_asn_database).exists():
            asn_path = config.geoip_asn_database
        else:
            logger.warning(
                f"GeoIP ASN database not found at {config.geoip_asn_database}, "
                "organization will not be reported"
            )

    locator = GeoIP2Locator.open(str(city_path), asn_path)
    logger.info(
        f"Loaded GeoIP City database from {city_path}"
        + (f" and ASN database from {asn_path}" if asn_path else "")
    )
    return locator
