"""Client info provider port."""

from typing import Protocol

from myip_service.domain.models import ClientContext, ClientReport, HandlerResult


class ClientInfoProvider(Protocol):
    """Port for describing a client from its request context."""

    def describe(self, context: ClientContext) -> HandlerResult[ClientReport]:
        """Describe the client. Faults are reported in the result, not raised."""
        ...
