"""User agent parser port."""

from typing import Protocol

from myip_service.domain.models.agent_info import AgentInfo


class AgentParser(Protocol):
    """Port for turning a User-Agent header into browser, OS and device info."""

    def parse(self, user_agent: str | None) -> AgentInfo:
        """Parse a User-Agent string. Must not raise."""
        ...
