"""
Hub Agent wire models.

These models define the structure of the data exchanged with the
Hub platform: pending commands coming in, command reports going out.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Enums


class CommandType(str, Enum):
    """Command discriminants understood by this agent."""

    SET_INGRESS_ACP = "set-ingress-acp"
    DELETE_INGRESS_ACP = "delete-ingress-acp"


class ReportStatus(str, Enum):
    """Outcome of a command."""

    SUCCESS = "success"
    FAILURE = "failure"


# Command payloads


class SetIngressACP(BaseModel):
    """Assign an AccessControlPolicy to an Ingress."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    ingress_id: str = Field(..., alias="ingressId")
    acp_name: str = Field(..., alias="acpName")


class DeleteIngressACP(BaseModel):
    """Remove the AccessControlPolicy of an Ingress."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    ingress_id: str = Field(..., alias="ingressId")


class UnsupportedPayload(BaseModel):
    """A command this agent version does not know how to handle."""

    model_config = ConfigDict(frozen=True)

    type: Optional[str] = None


CommandPayload = Union[SetIngressACP, DeleteIngressACP, UnsupportedPayload]

_PAYLOAD_MODELS = {
    CommandType.SET_INGRESS_ACP.value: SetIngressACP,
    CommandType.DELETE_INGRESS_ACP.value: DeleteIngressACP,
}


class Command(BaseModel):
    """Pending command as listed by the platform."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Unique command ID")
    created_at: datetime = Field(..., alias="createdAt")
    type: Optional[str] = Field(None, description="Command discriminant")
    data: Optional[Any] = Field(None, description="Raw command payload, decoded by payload()")

    @field_validator("created_at")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Timestamps without offset are read as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    def payload(self) -> CommandPayload:
        """
        Decode the payload into its command variant.

        Unknown or missing discriminants decode to UnsupportedPayload.

        Raises:
            pydantic.ValidationError: If a known command carries malformed data
        """
        model = _PAYLOAD_MODELS.get(self.type) if self.type else None
        if model is None:
            return UnsupportedPayload(type=self.type)

        # Non-object data fails validation here, not when the batch is listed.
        return model.model_validate(self.data if self.data is not None else {})


# Reports


class CommandReportError(BaseModel):
    """Error attached to a failed command report."""

    type: str
    data: Optional[Any] = None


class CommandReport(BaseModel):
    """Outcome of one command, sent back to the platform."""

    model_config = ConfigDict(populate_by_name=True)

    command_id: str = Field(..., alias="commandId")
    status: ReportStatus
    error: Optional[CommandReportError] = None

    @classmethod
    def success(cls, command_id: str) -> "CommandReport":
        return cls(command_id=command_id, status=ReportStatus.SUCCESS)

    @classmethod
    def failure(cls, command_id: str, error: CommandReportError) -> "CommandReport":
        return cls(command_id=command_id, status=ReportStatus.FAILURE, error=error)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize using the platform field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
