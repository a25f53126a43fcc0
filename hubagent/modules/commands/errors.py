from enum import Enum

from hubagent.modules.api import CommandReport, CommandReportError


class ReportErrorType(str, Enum):
    """Error types understood by the platform."""

    INTERNAL_ERROR = "internal-error"
    UNSUPPORTED_COMMAND = "unsupported-command"
    INVALID_INGRESS_ID = "invalid-ingress-id"
    INGRESS_NOT_FOUND = "ingress-not-found"
    ACP_NOT_FOUND = "acp-not-found"


def new_error_command_report(command_id: str, error_type: ReportErrorType) -> CommandReport:
    return CommandReport.failure(command_id, CommandReportError(type=error_type.value))


def new_internal_error_command_report(command_id: str, err: BaseException) -> CommandReport:
    return CommandReport.failure(
        command_id,
        CommandReportError(type=ReportErrorType.INTERNAL_ERROR.value, data=str(err)),
    )
