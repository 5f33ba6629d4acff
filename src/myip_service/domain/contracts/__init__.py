"""Contracts (protocols) implemented by adapters."""

from myip_service.domain.contracts.static_file_server import StaticFileServerProtocol

__all__ = ["StaticFileServerProtocol"]
