import logging

from pydantic import ValidationError

from hubagent.modules.api import Command, CommandReport, DeleteIngressACP, SetIngressACP
from hubagent.modules.kube import ACPStore, IngressStore

from .delete_ingress_acp import DeleteIngressACPCommand
from .errors import (
    ReportErrorType,
    new_error_command_report,
    new_internal_error_command_report,
)
from .set_ingress_acp import SetIngressACPCommand

logger = logging.getLogger(__name__)


class CommandRouter:
    """Dispatches each command to the handler of its payload variant."""

    def __init__(
        self,
        set_ingress_acp: SetIngressACPCommand,
        delete_ingress_acp: DeleteIngressACPCommand,
    ):
        self.set_ingress_acp = set_ingress_acp
        self.delete_ingress_acp = delete_ingress_acp

    @classmethod
    def from_stores(cls, ingresses: IngressStore, acps: ACPStore) -> "CommandRouter":
        return cls(
            set_ingress_acp=SetIngressACPCommand(ingresses, acps),
            delete_ingress_acp=DeleteIngressACPCommand(ingresses),
        )

    async def route(self, command: Command) -> CommandReport:
        """
        Handle a command and return its report.

        Unsupported commands are reported without touching the cluster.
        """
        try:
            payload = command.payload()
        except ValidationError as e:
            logger.error(f"Unable to decode payload of command {command.id} ({command.type}): {e}")
            return new_internal_error_command_report(command.id, e)

        if isinstance(payload, SetIngressACP):
            return await self.set_ingress_acp.handle(command.id, command.created_at, payload)

        if isinstance(payload, DeleteIngressACP):
            return await self.delete_ingress_acp.handle(command.id, command.created_at, payload)

        logger.error(f"Command {command.id} of type {payload.type!r} unsupported on this agent version")
        return new_error_command_report(command.id, ReportErrorType.UNSUPPORTED_COMMAND)
