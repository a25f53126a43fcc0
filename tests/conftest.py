"""
Shared pytest fixtures for Hub Agent tests.

This module provides common fixtures including:
- FakeIngressStore: In-memory Ingress store applying merge-patch semantics
- FakeACPStore: In-memory AccessControlPolicy lookups
- FakeCommandSource: Platform stand-in recording sent reports
- Command builders
"""

import copy
from datetime import UTC, datetime
from typing import Dict, List, Optional, Tuple

import pytest

from hubagent.exceptions import NotFoundError
from hubagent.modules.api import Command, CommandReport, CommandType
from hubagent.modules.kube import Ingress

INGRESS_ID = "my-ingress@my-ns.ingress.networking.k8s.io"


# =============================================================================
# Store Fakes
# =============================================================================

class FakeIngressStore:
    """
    In-memory Ingress store.

    Patches are applied the way the API server applies a JSON merge patch
    to metadata.annotations: null values delete keys, others overwrite.
    """

    def __init__(self, *ingresses: Ingress):
        self._ingresses: Dict[Tuple[str, str], Ingress] = {
            (ingress.namespace, ingress.name): copy.deepcopy(ingress) for ingress in ingresses
        }
        self.calls: List[tuple] = []
        self.history: List[Dict[str, str]] = []
        self.get_error: Optional[Exception] = None
        self.patch_error: Optional[Exception] = None

    async def get(self, name: str, namespace: str) -> Ingress:
        self.calls.append(("get", name, namespace))
        if self.get_error:
            raise self.get_error

        ingress = self._ingresses.get((namespace, name))
        if ingress is None:
            raise NotFoundError(f"ingress {namespace}/{name} not found")
        return copy.deepcopy(ingress)

    async def apply_merge_patch(self, name: str, namespace: str, patch: dict) -> None:
        self.calls.append(("patch", name, namespace, copy.deepcopy(patch)))
        if self.patch_error:
            raise self.patch_error

        ingress = self._ingresses.get((namespace, name))
        if ingress is None:
            raise NotFoundError(f"ingress {namespace}/{name} not found")

        for key, value in patch["metadata"]["annotations"].items():
            if value is None:
                ingress.annotations.pop(key, None)
            else:
                ingress.annotations[key] = value

        self.history.append(dict(ingress.annotations))

    def annotations(self, name: str = "my-ingress", namespace: str = "my-ns") -> Dict[str, str]:
        return dict(self._ingresses[(namespace, name)].annotations)

    @property
    def patch_count(self) -> int:
        return sum(1 for call in self.calls if call[0] == "patch")


class FakeACPStore:
    """In-memory AccessControlPolicy store."""

    def __init__(self, *names: str):
        self.names = set(names)
        self.calls: List[str] = []
        self.error: Optional[Exception] = None

    async def exists(self, name: str) -> bool:
        self.calls.append(name)
        if self.error:
            raise self.error
        return name in self.names


class FakeCommandSource:
    """Platform stand-in serving a fixed command list."""

    def __init__(self, commands: Optional[List[Command]] = None):
        self.commands = list(commands or [])
        self.sent: List[List[CommandReport]] = []
        self.list_calls = 0
        self.list_error: Optional[Exception] = None
        self.send_error: Optional[Exception] = None

    async def list_pending_commands(self) -> List[Command]:
        self.list_calls += 1
        if self.list_error:
            raise self.list_error
        return list(self.commands)

    async def send_command_reports(self, reports: List[CommandReport]) -> None:
        if self.send_error:
            raise self.send_error
        self.sent.append(list(reports))


# =============================================================================
# Command Builders
# =============================================================================

def set_acp_command(
    command_id: str,
    created_at: datetime,
    acp_name: str,
    ingress_id: str = INGRESS_ID,
) -> Command:
    return Command(
        id=command_id,
        created_at=created_at,
        type=CommandType.SET_INGRESS_ACP.value,
        data={"ingressId": ingress_id, "acpName": acp_name},
    )


def delete_acp_command(
    command_id: str,
    created_at: datetime,
    ingress_id: str = INGRESS_ID,
) -> Command:
    return Command(
        id=command_id,
        created_at=created_at,
        type=CommandType.DELETE_INGRESS_ACP.value,
        data={"ingressId": ingress_id},
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def now() -> datetime:
    """Current time truncated to the second, the precision of the annotation."""
    return datetime.now(UTC).replace(microsecond=0)


@pytest.fixture
def ingress() -> Ingress:
    return Ingress(
        name="my-ingress",
        namespace="my-ns",
        annotations={"something": "somewhere"},
    )


@pytest.fixture
def ingress_store(ingress) -> FakeIngressStore:
    return FakeIngressStore(ingress)


@pytest.fixture
def acp_store() -> FakeACPStore:
    return FakeACPStore("my-acp", "my-acp-2")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: Tests wiring several modules together"
    )
