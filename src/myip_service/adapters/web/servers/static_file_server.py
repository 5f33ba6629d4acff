"""Static file server implementation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.responses import FileResponse, Response
from starlette.routing import BaseRoute, Mount, Route
from starlette.staticfiles import StaticFiles

from myip_service.domain.contracts.static_file_server import StaticFileServerProtocol

from ..responses import not_found_response

if TYPE_CHECKING:
    from starlette.requests import Request

logger = logging.getLogger(__name__)

PAGES = {
    "/": "index.html",
    "/about": "about.html",
}


def find_static_dir(configured: str | None) -> Path | None:
    """Locate the directory with the static pages.

    An explicitly configured directory is used as given. Otherwise try
    ``./public`` (container layout) and the project's own ``public/``.
    """
    if configured:
        path = Path(configured)
        if path.is_dir():
            return path
        logger.warning(f"Configured static directory {path} does not exist")
        return None

    candidates = [
        Path.cwd() / "public",
        Path(__file__).parent.parent.parent.parent.parent.parent / "public",
    ]
    for path in candidates:
        if path.is_dir():
            return path
    logger.warning(f"Static directory not found at any of: {[str(p) for p in candidates]}")
    return None


class StaticFileServer(StaticFileServerProtocol):
    """Serves the named HTML pages and any other files in the static directory."""

    def __init__(self, static_dir: Path | None) -> None:
        """Initialize with the static directory, or None when there is none."""
        self.static_dir = static_dir

    def page_routes(self) -> list[BaseRoute]:
        return [
            Route(path, self._page_handler(filename), methods=["GET", "HEAD"])
            for path, filename in PAGES.items()
        ]

    def asset_routes(self) -> list[BaseRoute]:
        if self.static_dir is None:
            return []
        logger.info(f"Serving static files from {self.static_dir}")
        return [Mount("/", app=StaticFiles(directory=str(self.static_dir)), name="static")]

    def _page_handler(self, filename: str) -> Any:
        async def serve_page(_request: Request) -> Response:
            if self.static_dir is not None:
                page_path = self.static_dir / filename
                if page_path.is_file():
                    return FileResponse(str(page_path))
            logger.warning(f"Static page {filename} is missing")
            return not_found_response()

        return serve_page
