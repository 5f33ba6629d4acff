"""Speed test domain models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

PONG = "pong"
UPLOAD_ACK_MESSAGE = "Upload received"


@dataclass(frozen=True)
class SpeedPayload:
    """Opaque download payload. Only its length matters to the client."""

    data: bytes

    @classmethod
    def of_size(cls, size: int) -> "SpeedPayload":
        """Allocate a zero-filled payload of exactly ``size`` bytes."""
        if size <= 0:
            raise ValueError("payload size must be positive")
        return cls(data=bytes(size))

    @property
    def size(self) -> int:
        """Length of the payload in bytes."""
        return len(self.data)


class UploadReceipt(BaseModel):
    """Acknowledgment for a fully consumed upload body."""

    model_config = ConfigDict(frozen=True)

    bytes_received: int
    success: bool = True
    message: str = UPLOAD_ACK_MESSAGE

    def to_payload(self) -> dict[str, object]:
        """Public acknowledgment; the byte count stays server-side."""
        return {"success": self.success, "message": self.message}


class DiagnosticAck(BaseModel):
    """Liveness acknowledgment."""

    model_config = ConfigDict(frozen=True)

    message: str
    timestamp: str
