"""Geolocation adapters."""

from myip_service.adapters.geoip.geoip2_locator import (
    GeoIP2Locator,
    NullGeoLocator,
    create_geo_locator,
    normalize_ip,
)

__all__ = ["GeoIP2Locator", "NullGeoLocator", "create_geo_locator", "normalize_ip"]
