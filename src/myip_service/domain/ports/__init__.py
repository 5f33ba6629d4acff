"""Ports (interfaces) for the ports-and-adapters architecture."""

from myip_service.domain.ports.agent_parser import AgentParser
from myip_service.domain.ports.client_info_provider import ClientInfoProvider
from myip_service.domain.ports.diagnostic_provider import DiagnosticProvider
from myip_service.domain.ports.geo_locator import GeoLocator
from myip_service.domain.ports.server_adapter import ServerAdapter
from myip_service.domain.ports.speedtest_provider import SpeedtestProvider

__all__ = [
    "AgentParser",
    "ClientInfoProvider",
    "DiagnosticProvider",
    "GeoLocator",
    "ServerAdapter",
    "SpeedtestProvider",
]
