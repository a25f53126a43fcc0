"""
API Module - Black Box Interface

Purpose: Data exchanged with the Hub platform
Interface: Command, CommandReport and the command payload variants
Hidden: Wire field names, payload decoding

Other modules only handle the Python models, never raw JSON.
"""

from .models import (
    Command,
    CommandPayload,
    CommandReport,
    CommandReportError,
    CommandType,
    DeleteIngressACP,
    ReportStatus,
    SetIngressACP,
    UnsupportedPayload,
)

__all__ = [
    "Command",
    "CommandPayload",
    "CommandReport",
    "CommandReportError",
    "CommandType",
    "DeleteIngressACP",
    "ReportStatus",
    "SetIngressACP",
    "UnsupportedPayload",
]
