"""Protocol for static file serving."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from starlette.routing import BaseRoute


class StaticFileServerProtocol(Protocol):
    """Protocol for serving static pages."""

    def page_routes(self) -> list["BaseRoute"]:
        """Routes for the named pages, registered before the API catch-alls."""
        ...

    def asset_routes(self) -> list["BaseRoute"]:
        """Routes for remaining static assets, registered after every API route."""
        ...
