"""Cluster store interfaces following Black Box Design principles."""
from dataclasses import dataclass, field
from typing import Any, Dict, Protocol


@dataclass
class Ingress:
    """The parts of an Ingress the command handlers look at."""
    name: str
    namespace: str
    annotations: Dict[str, str] = field(default_factory=dict)


class IngressStore(Protocol):
    """Protocol for Ingress access - allows swappable implementations."""

    async def get(self, name: str, namespace: str) -> Ingress:
        """
        Fetch an Ingress.

        Raises:
            NotFoundError: If the Ingress does not exist
        """
        ...

    async def apply_merge_patch(self, name: str, namespace: str, patch: Dict[str, Any]) -> None:
        """Apply a JSON merge patch to an Ingress in a single request."""
        ...


class ACPStore(Protocol):
    """Protocol for AccessControlPolicy lookups."""

    async def exists(self, name: str) -> bool:
        """Tell whether the named AccessControlPolicy exists."""
        ...
