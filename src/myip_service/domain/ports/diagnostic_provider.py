"""Diagnostic provider port."""

from typing import Protocol

from myip_service.domain.models import DiagnosticAck


class DiagnosticProvider(Protocol):
    """Port for the liveness acknowledgment."""

    def acknowledge(self) -> DiagnosticAck:
        ...
