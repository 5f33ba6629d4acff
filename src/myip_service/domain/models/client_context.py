"""Client context domain model."""

from pydantic import BaseModel, ConfigDict


class ClientContext(BaseModel):
    """Request-scoped facts extracted once from an incoming request."""

    model_config = ConfigDict(frozen=True)

    ip: str | None = None
    user_agent: str | None = None
    headers: dict[str, str] = {}
    scheme: str = "http"
    secure: bool = False
    host: str | None = None
    origin: str | None = None
    method: str = "GET"
    url: str = "/"
    query: dict[str, str | list[str]] = {}

    def header(self, name: str) -> str | None:
        """Return a header value by case-insensitive name, or None when absent."""
        return self.headers.get(name.lower())
