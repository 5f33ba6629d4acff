"""Tests for the MaxMind-backed geolocation adapter."""

import ipaddress
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from geoip2.errors import AddressNotFoundError

from myip_service.adapters.config import AppConfig
from myip_service.adapters.geoip import (
    GeoIP2Locator,
    NullGeoLocator,
    create_geo_locator,
    normalize_ip,
)


def _city_response(**overrides: object) -> SimpleNamespace:
    response = SimpleNamespace(
        country=SimpleNamespace(iso_code="US"),
        subdivisions=SimpleNamespace(most_specific=SimpleNamespace(iso_code="CA")),
        city=SimpleNamespace(name="Mountain View"),
        location=SimpleNamespace(
            latitude=37.386,
            longitude=-122.0838,
            time_zone="America/Los_Angeles",
            metro_code=807,
        ),
        traits=SimpleNamespace(network=ipaddress.ip_network("8.8.8.0/24")),
    )
    for key, value in overrides.items():
        setattr(response, key, value)
    return response


class TestGeoIP2Locator:
    """Behavior tests for GeoIP2Locator lookups."""

    def test_when_address_found_then_returns_record(self) -> None:
        """Given an address in the City database, when looking up, then all fields are mapped."""
        city_reader = MagicMock()
        city_reader.city.return_value = _city_response()
        locator = GeoIP2Locator(city_reader)

        record = locator.lookup("8.8.8.8")

        assert record is not None
        assert record.country == "US"
        assert record.region == "CA"
        assert record.city == "Mountain View"
        assert record.timezone == "America/Los_Angeles"
        assert record.coordinates == (37.386, -122.0838)
        assert record.metro == 807
        assert record.ip_range == ("8.8.8.0", "8.8.8.255")
        assert record.org is None
        city_reader.city.assert_called_once_with("8.8.8.8")

    def test_when_address_not_found_then_returns_none(self) -> None:
        """Given an address missing from the database, when looking up, then returns None."""
        city_reader = MagicMock()
        city_reader.city.side_effect = AddressNotFoundError(
            "The address 10.0.0.1 is not in the database."
        )
        locator = GeoIP2Locator(city_reader)

        assert locator.lookup("10.0.0.1") is None

    def test_when_ip_invalid_then_returns_none_without_querying(self) -> None:
        """Given a non-IP string, when looking up, then returns None and skips the database."""
        city_reader = MagicMock()
        locator = GeoIP2Locator(city_reader)

        assert locator.lookup("testclient") is None
        assert locator.lookup(None) is None
        city_reader.city.assert_not_called()

    def test_when_ipv4_mapped_ipv6_then_queries_ipv4_form(self) -> None:
        """Given an IPv4-mapped IPv6 address, when looking up, then the IPv4 address is used."""
        city_reader = MagicMock()
        city_reader.city.return_value = _city_response()
        locator = GeoIP2Locator(city_reader)

        locator.lookup("::ffff:8.8.8.8")

        city_reader.city.assert_called_once_with("8.8.8.8")

    def test_when_fields_missing_then_uses_empty_defaults(self) -> None:
        """Given a sparse record, when looking up, then missing values become empty or None."""
        city_reader = MagicMock()
        city_reader.city.return_value = _city_response(
            subdivisions=SimpleNamespace(most_specific=SimpleNamespace(iso_code=None)),
            city=SimpleNamespace(name=None),
            location=SimpleNamespace(
                latitude=None, longitude=None, time_zone=None, metro_code=None
            ),
            traits=SimpleNamespace(network=None),
        )
        locator = GeoIP2Locator(city_reader)

        record = locator.lookup("1.1.1.1")

        assert record is not None
        assert record.region == ""
        assert record.city == ""
        assert record.coordinates is None
        assert record.ip_range is None

    def test_when_asn_database_present_then_org_is_reported(self) -> None:
        """Given an ASN reader, when looking up, then the organization is filled in."""
        city_reader = MagicMock()
        city_reader.city.return_value = _city_response()
        asn_reader = MagicMock()
        asn_reader.asn.return_value = SimpleNamespace(autonomous_system_organization="GOOGLE")
        locator = GeoIP2Locator(city_reader, asn_reader)

        record = locator.lookup("8.8.8.8")

        assert record is not None
        assert record.org == "GOOGLE"

    def test_when_asn_lookup_misses_then_org_is_none(self) -> None:
        city_reader = MagicMock()
        city_reader.city.return_value = _city_response()
        asn_reader = MagicMock()
        asn_reader.asn.side_effect = AddressNotFoundError("not found")
        locator = GeoIP2Locator(city_reader, asn_reader)

        record = locator.lookup("8.8.8.8")

        assert record is not None
        assert record.org is None

    def test_close_closes_all_readers(self) -> None:
        city_reader = MagicMock()
        asn_reader = MagicMock()
        locator = GeoIP2Locator(city_reader, asn_reader)

        locator.close()

        city_reader.close.assert_called_once()
        asn_reader.close.assert_called_once()


def test_normalize_ip() -> None:
    assert normalize_ip(" 203.0.113.1 ") == "203.0.113.1"
    assert normalize_ip("2001:0db8::0001") == "2001:db8::1"
    assert normalize_ip("") is None
    assert normalize_ip("not-an-ip") is None


def test_null_locator_never_finds_anything() -> None:
    assert NullGeoLocator().lookup("8.8.8.8") is None


class TestCreateGeoLocator:
    """Tests for building the locator from configuration."""

    def test_when_no_database_configured_then_null_locator(self) -> None:
        locator = create_geo_locator(AppConfig.for_testing())

        assert isinstance(locator, NullGeoLocator)

    def test_when_database_missing_then_null_locator(self, tmp_path: Path) -> None:
        config = AppConfig.for_testing(geoip_city_database=str(tmp_path / "missing.mmdb"))

        assert isinstance(create_geo_locator(config), NullGeoLocator)

    def test_when_database_present_then_opens_readers(self, tmp_path: Path) -> None:
        """Given existing City and ASN files, when building, then both are opened."""
        city_path = tmp_path / "city.mmdb"
        asn_path = tmp_path / "asn.mmdb"
        city_path.write_bytes(b"")
        asn_path.write_bytes(b"")
        config = AppConfig.for_testing(
            geoip_city_database=str(city_path), geoip_asn_database=str(asn_path)
        )

        with patch("geoip2.database.Reader") as reader:
            locator = create_geo_locator(config)

        assert isinstance(locator, GeoIP2Locator)
        opened = [call.args[0] for call in reader.call_args_list]
        assert opened == [str(city_path), str(asn_path)]

    def test_when_asn_database_missing_then_city_only(self, tmp_path: Path) -> None:
        city_path = tmp_path / "city.mmdb"
        city_path.write_bytes(b"")
        config = AppConfig.for_testing(
            geoip_city_database=str(city_path),
            geoip_asn_database=str(tmp_path / "missing.mmdb"),
        )

        with patch("geoip2.database.Reader") as reader:
            create_geo_locator(config)

        assert reader.call_count == 1
