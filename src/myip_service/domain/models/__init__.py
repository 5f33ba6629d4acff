"""Domain models for the client info service."""

from myip_service.domain.models.agent_info import UNKNOWN_FAMILY, UNKNOWN_VERSION, AgentInfo
from myip_service.domain.models.client_context import ClientContext
from myip_service.domain.models.client_report import (
    NOT_AVAILABLE,
    ClientReport,
    ConnectionInfo,
    EchoedHeaders,
)
from myip_service.domain.models.error_details import ErrorDetails, ErrorKind
from myip_service.domain.models.geo_record import GeoRecord
from myip_service.domain.models.handler_result import HandlerResult
from myip_service.domain.models.speedtest import (
    PONG,
    UPLOAD_ACK_MESSAGE,
    DiagnosticAck,
    SpeedPayload,
    UploadReceipt,
)

__all__ = [
    "NOT_AVAILABLE",
    "PONG",
    "UNKNOWN_FAMILY",
    "UNKNOWN_VERSION",
    "UPLOAD_ACK_MESSAGE",
    "AgentInfo",
    "ClientContext",
    "ClientReport",
    "ConnectionInfo",
    "DiagnosticAck",
    "EchoedHeaders",
    "ErrorDetails",
    "ErrorKind",
    "GeoRecord",
    "HandlerResult",
    "SpeedPayload",
    "UploadReceipt",
]
