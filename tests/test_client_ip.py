"""Behavior-focused tests for client IP resolution."""

from myip_service.adapters.config import DEFAULT_CLIENT_IP_HEADERS
from myip_service.adapters.web.client_ip import extract_client_ip, first_valid_ip


class TestExtractClientIp:
    """Tests for proxy-aware client IP extraction."""

    def test_when_x_forwarded_for_has_single_ip_then_returns_that_ip(self) -> None:
        """Given X-Forwarded-For with single IP, when extracting, then returns it."""
        headers = {"x-forwarded-for": "203.0.113.50"}

        assert extract_client_ip(headers, "10.0.0.1", DEFAULT_CLIENT_IP_HEADERS) == "203.0.113.50"

    def test_when_x_forwarded_for_has_chain_then_returns_first_ip(self) -> None:
        """Given X-Forwarded-For with IP chain, when extracting, then returns original client IP."""
        headers = {"x-forwarded-for": "203.0.113.50, 70.41.3.18, 150.172.238.178"}

        assert extract_client_ip(headers, None, DEFAULT_CLIENT_IP_HEADERS) == "203.0.113.50"

    def test_when_chain_starts_with_garbage_then_skips_to_first_valid_ip(self) -> None:
        """Given an invalid first entry, when extracting, then the first valid entry wins."""
        headers = {"x-forwarded-for": "unknown, 198.51.100.7"}

        assert extract_client_ip(headers, None, DEFAULT_CLIENT_IP_HEADERS) == "198.51.100.7"

    def test_when_x_client_ip_and_x_forwarded_for_then_x_client_ip_wins(self) -> None:
        """Given several forwarding headers, when extracting, then configured precedence is used."""
        headers = {"x-forwarded-for": "203.0.113.50", "x-client-ip": "192.0.2.9"}

        assert extract_client_ip(headers, None, DEFAULT_CLIENT_IP_HEADERS) == "192.0.2.9"

    def test_when_header_not_trusted_then_it_is_ignored(self) -> None:
        """Given a forwarding header outside the trusted list, when extracting, then uses peer."""
        headers = {"x-forwarded-for": "203.0.113.50"}

        assert extract_client_ip(headers, "10.0.0.1", ["x-real-ip"]) == "10.0.0.1"

    def test_when_no_forwarding_headers_then_uses_peer_address(self) -> None:
        """Given no forwarding headers, when extracting, then uses direct connection IP."""
        assert extract_client_ip({}, "10.0.0.1", DEFAULT_CLIENT_IP_HEADERS) == "10.0.0.1"

    def test_when_nothing_available_then_returns_none(self) -> None:
        """Given no headers and no peer, when extracting, then returns None."""
        assert extract_client_ip({}, None, DEFAULT_CLIENT_IP_HEADERS) is None


class TestFirstValidIp:
    """Tests for parsing individual forwarding header values."""

    def test_ipv4_with_port_is_stripped(self) -> None:
        assert first_valid_ip("203.0.113.5:41234") == "203.0.113.5"

    def test_bracketed_ipv6_with_port_is_unwrapped(self) -> None:
        assert first_valid_ip("[2001:db8::17]:4711") == "2001:db8::17"

    def test_bare_ipv6_is_kept(self) -> None:
        assert first_valid_ip("2001:db8::1") == "2001:db8::1"

    def test_rfc7239_forwarded_for_pair_is_parsed(self) -> None:
        assert first_valid_ip('for="[2001:db8:cafe::17]:4711";proto=https') == "2001:db8:cafe::17"
        assert first_valid_ip("for=192.0.2.60;proto=http;by=203.0.113.43") == "192.0.2.60"

    def test_forwarded_without_for_pair_yields_nothing(self) -> None:
        assert first_valid_ip("proto=https;by=203.0.113.43") is None

    def test_obfuscated_identifier_yields_nothing(self) -> None:
        assert first_valid_ip("for=_hidden") is None
