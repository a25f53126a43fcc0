"""
Unit tests for Hub Agent wire models.
"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from hubagent.modules.api import (
    Command,
    CommandReport,
    CommandReportError,
    DeleteIngressACP,
    ReportStatus,
    SetIngressACP,
    UnsupportedPayload,
)


class TestCommand:
    """Test command decoding."""

    def test_from_wire(self):
        command = Command.model_validate({
            "id": "cmd-1",
            "createdAt": "2024-03-01T12:30:45Z",
            "type": "set-ingress-acp",
            "data": {"ingressId": "whoami@default.ingress.networking.k8s.io", "acpName": "my-acp"},
        })

        assert command.id == "cmd-1"
        assert command.created_at == datetime(2024, 3, 1, 12, 30, 45, tzinfo=UTC)
        assert command.payload() == SetIngressACP(
            ingress_id="whoami@default.ingress.networking.k8s.io", acp_name="my-acp"
        )

    def test_delete_payload(self):
        command = Command.model_validate({
            "id": "cmd-1",
            "createdAt": "2024-03-01T12:30:45Z",
            "type": "delete-ingress-acp",
            "data": {"ingressId": "whoami@default.ingress.networking.k8s.io"},
        })

        assert command.payload() == DeleteIngressACP(ingress_id="whoami@default.ingress.networking.k8s.io")

    def test_naive_timestamp_is_utc(self):
        command = Command.model_validate({"id": "cmd-1", "createdAt": "2024-03-01T12:30:45"})

        assert command.created_at.tzinfo is not None
        assert command.created_at == datetime(2024, 3, 1, 12, 30, 45, tzinfo=UTC)

    def test_unknown_type_is_unsupported(self):
        command = Command.model_validate({
            "id": "cmd-1",
            "createdAt": "2024-03-01T12:30:45Z",
            "type": "set-middleware",
            "data": {"foo": "bar"},
        })

        assert command.payload() == UnsupportedPayload(type="set-middleware")

    def test_missing_payload_is_unsupported(self):
        command = Command.model_validate({"id": "cmd-1", "createdAt": "2024-03-01T12:30:45Z"})

        assert command.payload() == UnsupportedPayload()

    def test_malformed_known_payload(self):
        command = Command(
            id="cmd-1",
            created_at=datetime(2024, 3, 1, tzinfo=UTC),
            type="delete-ingress-acp",
            data={},
        )

        with pytest.raises(ValidationError):
            command.payload()

    def test_missing_created_at(self):
        with pytest.raises(ValidationError):
            Command.model_validate({"id": "cmd-1"})


class TestCommandReport:
    """Test report encoding."""

    def test_success_wire_shape(self):
        assert CommandReport.success("cmd-1").to_wire() == {"commandId": "cmd-1", "status": "success"}

    def test_failure_wire_shape(self):
        report = CommandReport.failure("cmd-1", CommandReportError(type="acp-not-found"))

        assert report.status == ReportStatus.FAILURE
        assert report.to_wire() == {
            "commandId": "cmd-1",
            "status": "failure",
            "error": {"type": "acp-not-found"},
        }

    def test_failure_with_data(self):
        report = CommandReport.failure(
            "cmd-1", CommandReportError(type="internal-error", data="operation already executed")
        )

        assert report.to_wire()["error"] == {"type": "internal-error", "data": "operation already executed"}


class TestCommandDataShape:
    """Payload shape is only checked when the command is decoded."""

    @pytest.mark.parametrize("data", [["x"], "x", 42], ids=["list", "string", "number"])
    def test_unknown_type_with_non_object_data(self, data):
        command = Command.model_validate({
            "id": "cmd-1",
            "createdAt": "2024-03-01T12:30:45Z",
            "type": "future-command",
            "data": data,
        })

        assert command.payload() == UnsupportedPayload(type="future-command")

    @pytest.mark.parametrize("data", [["x"], "x", 42], ids=["list", "string", "number"])
    def test_known_type_with_non_object_data(self, data):
        command = Command.model_validate({
            "id": "cmd-1",
            "createdAt": "2024-03-01T12:30:45Z",
            "type": "set-ingress-acp",
            "data": data,
        })

        with pytest.raises(ValidationError):
            command.payload()
