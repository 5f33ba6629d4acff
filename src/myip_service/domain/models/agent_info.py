"""User agent domain model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

UNKNOWN_FAMILY = "Other"
UNKNOWN_VERSION = "0.0.0"


class AgentInfo(BaseModel):
    """Browser, OS and device identified from a User-Agent header."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    browser: str = UNKNOWN_FAMILY
    version: str = UNKNOWN_VERSION
    os: str = UNKNOWN_FAMILY
    os_version: str = UNKNOWN_VERSION
    device: str = UNKNOWN_FAMILY

    @classmethod
    def unknown(cls) -> "AgentInfo":
        """Agent info for a missing or unparseable User-Agent."""
        return cls()
