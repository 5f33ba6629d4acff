"""Use case: confirm the process is reachable."""

from myip_service.application.clock import Clock, iso_timestamp, utc_now
from myip_service.domain.models import DiagnosticAck

DIAGNOSTIC_MESSAGE = "API is working"


class DiagnosticService:
    """Produces the constant liveness acknowledgment."""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def acknowledge(self) -> DiagnosticAck:
        return DiagnosticAck(message=DIAGNOSTIC_MESSAGE, timestamp=iso_timestamp(self._clock()))
