"""Web adapters exposing the service over HTTP."""

from myip_service.adapters.web.starlette_app import StarletteWebAdapter, create_app

__all__ = ["StarletteWebAdapter", "create_app"]
