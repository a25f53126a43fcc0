import logging
from datetime import datetime

from hubagent.exceptions import NotFoundError
from hubagent.modules.api import CommandReport, SetIngressACP
from hubagent.modules.kube import ACPStore, IngressStore

from .annotations import build_set_patch, is_stale
from .errors import (
    ReportErrorType,
    new_error_command_report,
    new_internal_error_command_report,
)
from .ingress_id import parse_ingress_id

logger = logging.getLogger(__name__)


class SetIngressACPCommand:
    """Sets the AccessControlPolicy of a given Ingress."""

    def __init__(self, ingresses: IngressStore, acps: ACPStore):
        self.ingresses = ingresses
        self.acps = acps

    async def handle(
        self, command_id: str, requested_at: datetime, payload: SetIngressACP
    ) -> CommandReport:
        """
        Apply the ACP assignment and report the outcome.

        Every failure is turned into a report; nothing is raised.
        """
        name, ns, ok = parse_ingress_id(payload.ingress_id)
        if not ok:
            logger.error(
                f"[set_ingress_acp] Unable to extract name and namespace from ingress ID {payload.ingress_id!r}"
            )
            return new_error_command_report(command_id, ReportErrorType.INVALID_INGRESS_ID)

        target = f"{ns}/{name}"

        try:
            ingress = await self.ingresses.get(name, ns)
        except NotFoundError as e:
            logger.error(f"[set_ingress_acp] Ingress {target} not found: {e}")
            return new_error_command_report(command_id, ReportErrorType.INGRESS_NOT_FOUND)
        except Exception as e:
            logger.error(f"[set_ingress_acp] Unable to find Ingress {target}: {e}")
            return new_internal_error_command_report(command_id, e)

        if is_stale(ingress.annotations, requested_at):
            logger.debug(f"[set_ingress_acp] Command {command_id} already applied on {target}. Ignoring")
            return new_internal_error_command_report(
                command_id, RuntimeError("operation already executed")
            )

        try:
            exists = await self.acps.exists(payload.acp_name)
        except Exception as e:
            logger.error(f"[set_ingress_acp] Unable to find ACP {payload.acp_name!r}: {e}")
            return new_internal_error_command_report(command_id, e)

        if not exists:
            logger.error(f"[set_ingress_acp] ACP {payload.acp_name!r} not found")
            return new_error_command_report(command_id, ReportErrorType.ACP_NOT_FOUND)

        patch = build_set_patch(requested_at, payload.acp_name)

        try:
            await self.ingresses.apply_merge_patch(name, ns, patch)
        except Exception as e:
            logger.error(f"[set_ingress_acp] Unable to set ACP {payload.acp_name!r} on Ingress {target}: {e}")
            return new_internal_error_command_report(command_id, e)

        logger.info(f"ACP {payload.acp_name!r} set on Ingress {target}")
        return CommandReport.success(command_id)
