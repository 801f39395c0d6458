"""Common ARM envelope types shared by every resource provider."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from armkit.models.base import ArmModel, ListResult
from armkit.models.enums import OpenEnum


class CreatedByType(OpenEnum):
    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


class SystemData(ArmModel):
    """Creation and last-modification metadata."""

    created_by: str | None = None
    created_by_type: CreatedByType | None = None
    created_at: datetime | None = None
    last_modified_by: str | None = None
    last_modified_by_type: CreatedByType | None = None
    last_modified_at: datetime | None = None


class Resource(ArmModel):
    """Fields common to every ARM resource. All are read-only."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    system_data: SystemData | None = None


class ProxyResource(Resource):
    """A resource without location or tags (child resources)."""


class TrackedResource(Resource):
    """A top-level resource with a location and tags."""

    _required: ClassVar[tuple[str, ...]] = ("location",)

    location: str | None = None
    tags: dict[str, str] | None = None


class ExtendedLocationType(OpenEnum):
    EDGE_ZONE = "EdgeZone"
    CUSTOM_LOCATION = "CustomLocation"


class ExtendedLocation(ArmModel):
    name: str | None = None
    type: ExtendedLocationType | None = None


class ErrorAdditionalInfo(ArmModel):
    type: str | None = None
    info: Any = None


class ErrorDetail(ArmModel):
    code: str | None = None
    message: str | None = None
    target: str | None = None
    details: list[ErrorDetail] | None = None
    additional_info: list[ErrorAdditionalInfo] | None = None


class ErrorResponse(ArmModel):
    """The body ARM returns with a failed request."""

    error: ErrorDetail | None = None


class Origin(OpenEnum):
    USER = "user"
    SYSTEM = "system"
    USER_SYSTEM = "user,system"


class ActionType(OpenEnum):
    INTERNAL = "Internal"


class OperationDisplay(ArmModel):
    provider: str | None = None
    resource: str | None = None
    operation: str | None = None
    description: str | None = None


class Operation(ArmModel):
    """An operation exposed by a resource provider."""

    name: str | None = None
    is_data_action: bool | None = None
    display: OperationDisplay | None = None
    origin: Origin | None = None
    action_type: ActionType | None = None


class OperationListResult(ListResult[Operation]):
    pass
