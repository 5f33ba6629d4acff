"""Speed test provider port."""

from collections.abc import AsyncIterator
from typing import Protocol

from myip_service.domain.models import HandlerResult, SpeedPayload, UploadReceipt


class SpeedtestProvider(Protocol):
    """Port for the ping, download and upload speed test operations."""

    def ping(self) -> str:
        """Latency probe body."""
        ...

    def download_payload(self) -> SpeedPayload:
        """Fixed-size download payload."""
        ...

    async def receive_upload(
        self,
        chunks: AsyncIterator[bytes],
        declared_length: int | None = None,
    ) -> HandlerResult[UploadReceipt]:
        """Consume and discard an upload body."""
        ...
