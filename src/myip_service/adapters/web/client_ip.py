"""Proxy-aware client IP resolution."""

from __future__ import annotations

import ipaddress
import logging
from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)


def _is_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def _clean_candidate(token: str) -> str | None:
    """Strip quoting, brackets and ports from one forwarding header entry.

    Handles ``1.2.3.4``, ``1.2.3.4:5678``, ``[2001:db8::1]:443``, ``2001:db8::1``
    and RFC 7239 ``for=...`` pairs. Returns None when no valid IP remains.
    """
    candidate = token.strip()
    if "=" in candidate:
        for pair in candidate.split(";"):
            key, _, value = pair.strip().partition("=")
            if key.strip().lower() == "for":
                candidate = value.strip()
                break
        else:
            return None
    candidate = candidate.strip('"')
    if candidate.startswith("["):
        candidate = candidate[1:].split("]", 1)[0]
    elif candidate.count(":") == 1:
        candidate = candidate.split(":", 1)[0]
    return candidate if _is_ip(candidate) else None


def first_valid_ip(header_value: str) -> str | None:
    """First valid IP of a possibly comma-separated header value (client, proxy1, proxy2)."""
    for token in header_value.split(","):
        ip = _clean_candidate(token)
        if ip:
            return ip
    return None


def extract_client_ip(
    headers: Mapping[str, str],
    peer_host: str | None,
    trusted_headers: Sequence[str],
) -> str | None:
    """Resolve the originating client address.

    Trusted forwarding headers are checked in order; the first one holding a
    valid IP wins. Otherwise the socket peer address is used as-is.

    Args:
        headers: Request headers keyed by lower-cased name.
        peer_host: Address of the directly connected peer, if known.
        trusted_headers: Lower-cased header names to consult, in precedence order.
    """
    for name in trusted_headers:
        value = headers.get(name)
        if not value:
            continue
        ip = first_valid_ip(value)
        if ip:
            return ip
        logger.debug(f"Ignoring {name} header without a valid IP: {value!r}")

    if peer_host:
        return peer_host

    logger.warning("Could not determine client IP")
    return None
