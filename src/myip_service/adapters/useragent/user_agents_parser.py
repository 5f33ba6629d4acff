"""User agent parsing adapter using the user-agents library."""

import logging

from user_agents import parse

from myip_service.domain.models import UNKNOWN_FAMILY, UNKNOWN_VERSION, AgentInfo

logger = logging.getLogger(__name__)


class UserAgentsParser:
    """Best-effort User-Agent parser. Unknown parts resolve to ``Other`` / ``0.0.0``."""

    def parse(self, user_agent: str | None) -> AgentInfo:
        if not user_agent:
            return AgentInfo.unknown()
        try:
            parsed = parse(user_agent)
        except Exception:
            logger.warning("Could not parse user agent %r", user_agent[:200], exc_info=True)
            return AgentInfo.unknown()

        return AgentInfo(
            browser=parsed.browser.family or UNKNOWN_FAMILY,
            version=parsed.browser.version_string or UNKNOWN_VERSION,
            os=parsed.os.family or UNKNOWN_FAMILY,
            os_version=parsed.os.version_string or UNKNOWN_VERSION,
            device=parsed.device.family or UNKNOWN_FAMILY,
        )
