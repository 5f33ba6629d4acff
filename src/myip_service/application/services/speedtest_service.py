"""Use cases for the synthetic speed test endpoints."""

import logging
from collections.abc import AsyncIterator

from myip_service.domain.models import (
    PONG,
    ErrorDetails,
    HandlerResult,
    SpeedPayload,
    UploadReceipt,
)

logger = logging.getLogger(__name__)


class SpeedtestService:
    """Ping, download and upload handling for client-driven speed tests.

    The download payload is allocated once and shared read-only by every
    request. Uploads are consumed chunk by chunk and discarded, so peak memory
    stays at one chunk regardless of the upload ceiling.
    """

    def __init__(self, download_size_bytes: int, upload_max_bytes: int) -> None:
        """Initialize the service.

        Args:
            download_size_bytes: Exact size of the download payload.
            upload_max_bytes: Largest accepted upload body.
        """
        if upload_max_bytes <= 0:
            raise ValueError("upload_max_bytes must be positive")
        self._payload = SpeedPayload.of_size(download_size_bytes)
        self.upload_max_bytes = upload_max_bytes

    def ping(self) -> str:
        """Latency probe response."""
        return PONG

    def download_payload(self) -> SpeedPayload:
        """The canonical download payload."""
        return self._payload

    async def receive_upload(
        self,
        chunks: AsyncIterator[bytes],
        declared_length: int | None = None,
    ) -> HandlerResult[UploadReceipt]:
        """Read an upload body to completion and discard it.

        A declared length above the ceiling is rejected without reading; a body
        that grows past the ceiling while streaming is rejected as soon as it does.
        """
        if declared_length is not None and declared_length > self.upload_max_bytes:
            logger.info(
                f"Rejecting upload with declared length {declared_length} "
                f"(limit {self.upload_max_bytes})"
            )
            return HandlerResult.fail(ErrorDetails.payload_too_large())

        received = 0
        async for chunk in chunks:
            received += len(chunk)
            if received > self.upload_max_bytes:
                logger.info(f"Rejecting upload after {received} bytes (limit {self.upload_max_bytes})")
                return HandlerResult.fail(ErrorDetails.payload_too_large())

        logger.debug(f"Upload received: {received} bytes")
        return HandlerResult.ok(UploadReceipt(bytes_received=received))
