import logging
from datetime import datetime

from hubagent.exceptions import NotFoundError
from hubagent.modules.api import CommandReport, DeleteIngressACP
from hubagent.modules.kube import IngressStore

from .annotations import build_delete_patch, is_stale
from .errors import (
    ReportErrorType,
    new_error_command_report,
    new_internal_error_command_report,
)
from .ingress_id import parse_ingress_id

logger = logging.getLogger(__name__)


class DeleteIngressACPCommand:
    """Removes the AccessControlPolicy of a given Ingress."""

    def __init__(self, ingresses: IngressStore):
        self.ingresses = ingresses

    async def handle(
        self, command_id: str, requested_at: datetime, payload: DeleteIngressACP
    ) -> CommandReport:
        name, ns, ok = parse_ingress_id(payload.ingress_id)
        if not ok:
            logger.error(
                f"[delete_ingress_acp] Unable to extract name and namespace from ingress ID {payload.ingress_id!r}"
            )
            return new_error_command_report(command_id, ReportErrorType.INVALID_INGRESS_ID)

        target = f"{ns}/{name}"

        try:
            ingress = await self.ingresses.get(name, ns)
        except NotFoundError as e:
            logger.error(f"[delete_ingress_acp] Ingress {target} not found: {e}")
            return new_error_command_report(command_id, ReportErrorType.INGRESS_NOT_FOUND)
        except Exception as e:
            logger.error(f"[delete_ingress_acp] Unable to find Ingress {target}: {e}")
            return new_internal_error_command_report(command_id, e)

        if is_stale(ingress.annotations, requested_at):
            logger.debug(f"[delete_ingress_acp] Command {command_id} already applied on {target}. Ignoring")
            return new_internal_error_command_report(
                command_id, RuntimeError("operation already executed")
            )

        try:
            await self.ingresses.apply_merge_patch(name, ns, build_delete_patch(requested_at))
        except Exception as e:
            logger.error(f"[delete_ingress_acp] Unable to delete ACP of Ingress {target}: {e}")
            return new_internal_error_command_report(command_id, e)

        logger.info(f"ACP removed from Ingress {target}")
        return CommandReport.success(command_id)
