"""Conversion of handler results into HTTP responses."""

from typing import Any

from starlette.responses import JSONResponse

from myip_service.domain.models import ErrorDetails, ErrorKind

STATUS_BY_ERROR_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PAYLOAD_TOO_LARGE: 413,
    ErrorKind.INTERNAL: 500,
}

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def error_response(error: ErrorDetails) -> JSONResponse:
    """JSON error body with the status code for the error kind."""
    return JSONResponse(error.to_payload(), status_code=STATUS_BY_ERROR_KIND[error.kind])


def not_found_response(*_args: Any) -> JSONResponse:
    """Catch-all 404 body; usable directly as a Starlette exception handler."""
    return error_response(ErrorDetails.not_found())


def internal_error_response(*_args: Any) -> JSONResponse:
    """Uniform 500 body; usable directly as a Starlette exception handler."""
    return error_response(ErrorDetails.internal())
