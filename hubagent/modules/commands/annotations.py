"""
Ingress annotations owned by the command handlers.

The last-patch-requested-at annotation is the idempotency token: it records
the creation date of the last command applied to the Ingress. A command whose
creation date is not strictly after the token is considered already applied.
"""

import logging
import re
from datetime import UTC, datetime, timedelta
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# Date at which an update has been requested, in the RFC-3339 format.
ANNOTATION_LAST_PATCH_REQUESTED_AT = "hub.traefik.io/last-patch-requested-at"

# Name of the AccessControlPolicy protecting the Ingress.
ANNOTATION_ACCESS_CONTROL_POLICY = "hub.traefik.io/access-control-policy"

_RFC3339_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})$"
)


def _as_utc_aware(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=UTC)
    return ts


def format_rfc3339(ts: datetime) -> str:
    """Format with second precision, ``Z`` for UTC and ``+HH:MM`` otherwise."""
    ts = _as_utc_aware(ts).replace(microsecond=0)
    if ts.utcoffset() == timedelta(0):
        return ts.strftime("%Y-%m-%dT%H:%M:%SZ")
    return ts.isoformat(timespec="seconds")


def parse_rfc3339(value: str) -> datetime:
    """
    Parse an RFC-3339 timestamp.

    Raises:
        ValueError: If the value is not a valid RFC-3339 timestamp
    """
    match = _RFC3339_RE.match(value.upper())
    if not match:
        raise ValueError(f"{value!r} is not an RFC-3339 timestamp")

    normalized = match.group("base")
    if match.group("fraction"):
        # datetime only keeps microseconds
        normalized += "." + match.group("fraction")[:6].ljust(6, "0")
    offset = match.group("offset")
    normalized += "+00:00" if offset == "Z" else offset

    return datetime.fromisoformat(normalized)


def last_patch_requested_at(annotations: Mapping[str, str]) -> Optional[datetime]:
    """Read the idempotency token, ignoring it when malformed."""
    raw = annotations.get(ANNOTATION_LAST_PATCH_REQUESTED_AT)
    if raw is None:
        return None

    try:
        return parse_rfc3339(raw)
    except ValueError as e:
        logger.warning(
            f"Unexpected {ANNOTATION_LAST_PATCH_REQUESTED_AT!r} annotation format, "
            f"expected RFC-3339 format. Ignoring annotation: {e}"
        )
        return None


def is_stale(annotations: Mapping[str, str], requested_at: datetime) -> bool:
    """Tell whether a command created at requested_at was already applied."""
    patched_at = last_patch_requested_at(annotations)
    if patched_at is None:
        return False

    return _as_utc_aware(requested_at) <= patched_at


def _annotations_patch(annotations: Dict[str, Optional[str]]) -> Dict[str, Any]:
    return {"metadata": {"annotations": annotations}}


def build_set_patch(requested_at: datetime, acp_name: str) -> Dict[str, Any]:
    """Merge patch assigning acp_name and moving the token to requested_at."""
    return _annotations_patch({
        ANNOTATION_LAST_PATCH_REQUESTED_AT: format_rfc3339(requested_at),
        ANNOTATION_ACCESS_CONTROL_POLICY: acp_name,
    })


def build_delete_patch(requested_at: datetime) -> Dict[str, Any]:
    """Merge patch removing the ACP annotation and moving the token to requested_at."""
    # A null value makes the merge delete the key.
    return _annotations_patch({
        ANNOTATION_LAST_PATCH_REQUESTED_AT: format_rfc3339(requested_at),
        ANNOTATION_ACCESS_CONTROL_POLICY: None,
    })
