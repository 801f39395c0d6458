"""Shared model layer: base model, open enums and ARM envelope types."""

from armkit.models.base import UNKNOWN_FIELDS, ArmModel, ListResult
from armkit.models.enums import OpenEnum
from armkit.models.resource import (
    CreatedByType,
    ErrorAdditionalInfo,
    ErrorDetail,
    ErrorResponse,
    ExtendedLocation,
    ExtendedLocationType,
    Operation,
    OperationDisplay,
    OperationListResult,
    ProxyResource,
    Resource,
    SystemData,
    TrackedResource,
)

__all__ = [
    "UNKNOWN_FIELDS",
    "ArmModel",
    "CreatedByType",
    "ErrorAdditionalInfo",
    "ErrorDetail",
    "ErrorResponse",
    "ExtendedLocation",
    "ExtendedLocationType",
    "ListResult",
    "Operation",
    "OperationDisplay",
    "OperationListResult",
    "OpenEnum",
    "Resource",
    "SystemData",
    "TrackedResource",
]
