"""User agent adapters."""

from myip_service.adapters.useragent.user_agents_parser import UserAgentsParser

__all__ = ["UserAgentsParser"]
