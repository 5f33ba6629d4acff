"""Application services."""

from myip_service.application.services.client_info_service import ClientInfoService
from myip_service.application.services.diagnostic_service import (
    DIAGNOSTIC_MESSAGE,
    DiagnosticService,
)
from myip_service.application.services.speedtest_service import SpeedtestService

__all__ = [
    "DIAGNOSTIC_MESSAGE",
    "ClientInfoService",
    "DiagnosticService",
    "SpeedtestService",
]
