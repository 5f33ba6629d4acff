"""Server adapter port."""

from abc import ABC, abstractmethod


class ServerAdapter(ABC):
    """Port for exposing the service to clients."""

    @abstractmethod
    async def start(self) -> None:
        """Start serving requests."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop serving requests."""
        ...
