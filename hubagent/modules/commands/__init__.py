"""
Commands Module - Black Box Interface

Purpose: Apply the platform commands to cluster objects, at most once each
Interface: Watcher.run(), Watcher.run_cycle(), CommandRouter.route()
Hidden: Ordering, idempotency annotations, patch construction, report shaping

Handlers only reach the cluster through the kube module stores.
"""

from .annotations import (
    ANNOTATION_ACCESS_CONTROL_POLICY,
    ANNOTATION_LAST_PATCH_REQUESTED_AT,
)
from .delete_ingress_acp import DeleteIngressACPCommand
from .errors import ReportErrorType
from .ingress_id import parse_ingress_id
from .router import CommandRouter
from .set_ingress_acp import SetIngressACPCommand
from .watcher import CommandSource, Watcher

__all__ = [
    "ANNOTATION_ACCESS_CONTROL_POLICY",
    "ANNOTATION_LAST_PATCH_REQUESTED_AT",
    "CommandRouter",
    "CommandSource",
    "DeleteIngressACPCommand",
    "ReportErrorType",
    "SetIngressACPCommand",
    "Watcher",
    "parse_ingress_id",
]
