"""Geolocation domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer


class GeoRecord(BaseModel):
    """Approximate location of an IP address, as found in a local dataset.

    ``org`` is only known when an ASN dataset is available; it is left out of
    the serialized form entirely when missing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    country: str = ""
    region: str = ""
    city: str = ""
    timezone: str | None = None
    coordinates: tuple[float, float] | None = Field(default=None, alias="ll")
    metro: int | None = None
    ip_range: tuple[str, str] | None = Field(default=None, alias="range")
    org: str | None = None

    @model_serializer(mode="wrap")
    def drop_unknown_org(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        if data.get("org") is None:
            data.pop("org", None)
        return data
