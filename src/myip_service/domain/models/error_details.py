"""Error details domain model."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ErrorKind(StrEnum):
    """Categories of failure a handler can report."""

    NOT_FOUND = "not_found"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    INTERNAL = "internal"


class ErrorDetails(BaseModel):
    """Details about a failed request, safe to show to the caller."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    reason: str

    @classmethod
    def not_found(cls) -> "ErrorDetails":
        return cls(kind=ErrorKind.NOT_FOUND, reason="Endpoint not found")

    @classmethod
    def payload_too_large(cls) -> "ErrorDetails":
        return cls(kind=ErrorKind.PAYLOAD_TOO_LARGE, reason="Payload too large")

    @classmethod
    def internal(cls) -> "ErrorDetails":
        return cls(kind=ErrorKind.INTERNAL, reason="Internal server error")

    def to_payload(self) -> dict[str, object]:
        """JSON body for an error response."""
        return {"success": False, "error": self.reason}
