"""Client report domain models returned by the client info endpoint."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from myip_service.domain.models.agent_info import AgentInfo
from myip_service.domain.models.geo_record import GeoRecord

NOT_AVAILABLE = "N/A"


class ConnectionInfo(BaseModel):
    """Transport-level facts about the request."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    secure: bool
    protocol: str
    host: str | None
    origin: str = NOT_AVAILABLE


class EchoedHeaders(BaseModel):
    """The handful of request headers reported back individually."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    accept_language: str = NOT_AVAILABLE
    accept_encoding: str = NOT_AVAILABLE
    connection: str = NOT_AVAILABLE
    cache_control: str = NOT_AVAILABLE


class ClientReport(BaseModel):
    """Everything the service can tell a caller about their own request."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    timestamp: str
    ip_address: str | None
    location: GeoRecord | None
    user_agent: AgentInfo
    connection: ConnectionInfo
    headers: EchoedHeaders
    raw_headers: dict[str, str]
    method: str
    url: str
    query: dict[str, str | list[str]]

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON shape sent over the wire."""
        return self.model_dump(mode="json", by_alias=True)
