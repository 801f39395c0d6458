"""Schema types for Microsoft.TimeSeriesInsights.

Environments and event sources are polymorphic on ``kind``. Decoding picks
the concrete class from the ``kind`` value and falls back to the base class
when the service reports a kind this client does not know.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Annotated, Any, ClassVar, Union

from pydantic import Discriminator, Tag, TypeAdapter, ValidationError

from armkit.client.errors import DecodeError
from armkit.models.base import WIRE_CONTEXT, ArmModel
from armkit.models.enums import OpenEnum
from armkit.models.resource import TrackedResource

_OTHER = "other"


class SkuName(OpenEnum):
    S1 = "S1"
    S2 = "S2"
    P1 = "P1"
    L1 = "L1"


class EnvironmentKind(OpenEnum):
    GEN1 = "Gen1"
    GEN2 = "Gen2"


class EventSourceKind(OpenEnum):
    EVENT_HUB = "Microsoft.EventHub"
    IOT_HUB = "Microsoft.IoTHub"


class ProvisioningState(OpenEnum):
    ACCEPTED = "Accepted"
    CREATING = "Creating"
    UPDATING = "Updating"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    DELETING = "Deleting"


class StorageLimitExceededBehavior(OpenEnum):
    PURGE_OLD_DATA = "PurgeOldData"
    PAUSE_INGRESS = "PauseIngress"


class PublicNetworkAccess(OpenEnum):
    ENABLED = "enabled"
    DISABLED = "disabled"


class IngressState(OpenEnum):
    DISABLED = "Disabled"
    READY = "Ready"
    RUNNING = "Running"
    PAUSED = "Paused"
    UNKNOWN = "Unknown"


class IngressStartAtType(OpenEnum):
    EARLIEST_AVAILABLE = "EarliestAvailable"
    EVENT_SOURCE_CREATION_TIME = "EventSourceCreationTime"
    CUSTOM_ENQUEUED_TIME = "CustomEnqueuedTime"


class TimeSeriesIdPropertyType(OpenEnum):
    STRING = "String"


class LocalTimestampFormat(OpenEnum):
    EMBEDDED = "Embedded"


class Sku(ArmModel):
    """Billing tier and capacity of an environment.

    Capacity is the number of ingress units for Gen1 SKUs and is fixed at 1
    for L1.
    """

    _required: ClassVar[tuple[str, ...]] = ("name", "capacity")

    name: SkuName | None = None
    capacity: int | None = None


# -- environments -----------------------------------------------------------


class TimeSeriesIdProperty(ArmModel):
    name: str | None = None
    type: TimeSeriesIdPropertyType | None = None


class EnvironmentStateDetails(ArmModel):
    code: str | None = None
    message: str | None = None


class IngressEnvironmentStatus(ArmModel):
    state: IngressState | None = None
    state_details: EnvironmentStateDetails | None = None


class WarmStoragePropertiesUsageStateDetails(ArmModel):
    current_count: int | None = None
    max_count: int | None = None


class WarmStoragePropertiesUsage(ArmModel):
    state: str | None = None
    state_details: WarmStoragePropertiesUsageStateDetails | None = None


class WarmStorageEnvironmentStatus(ArmModel):
    properties_usage: WarmStoragePropertiesUsage | None = None


class EnvironmentStatus(ArmModel):
    ingress: IngressEnvironmentStatus | None = None
    warm_storage: WarmStorageEnvironmentStatus | None = None


class Gen1EnvironmentResourceProperties(ArmModel):
    data_retention_time: str | None = None
    storage_limit_exceeded_behavior: StorageLimitExceededBehavior | None = None
    partition_key_properties: list[TimeSeriesIdProperty] | None = None
    provisioning_state: ProvisioningState | None = None
    creation_time: datetime | None = None
    data_access_id: str | None = None
    data_access_fqdn: str | None = None
    status: EnvironmentStatus | None = None


class Gen2StorageConfigurationOutput(ArmModel):
    account_name: str | None = None


class Gen2StorageConfigurationInput(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("account_name", "management_key")

    account_name: str | None = None
    management_key: str | None = None


class WarmStoreConfigurationProperties(ArmModel):
    """Warm store retention as an ISO 8601 duration (e.g. ``P7D``)."""

    data_retention: str | None = None


class Gen2EnvironmentResourceProperties(ArmModel):
    provisioning_state: ProvisioningState | None = None
    creation_time: datetime | None = None
    data_access_id: str | None = None
    data_access_fqdn: str | None = None
    status: EnvironmentStatus | None = None
    time_series_id_properties: list[TimeSeriesIdProperty] | None = None
    storage_configuration: Gen2StorageConfigurationOutput | None = None
    warm_store_configuration: WarmStoreConfigurationProperties | None = None
    public_network_access: PublicNetworkAccess | None = None


class EnvironmentResource(TrackedResource):
    """An environment whose kind this client may not know.

    ``properties`` is kept as the raw mapping; the Gen1 and Gen2 subclasses
    type it.
    """

    sku: Sku | None = None
    kind: EnvironmentKind | None = None
    properties: dict[str, Any] | None = None


class Gen1EnvironmentResource(EnvironmentResource):
    kind: EnvironmentKind | None = EnvironmentKind.GEN1
    properties: Gen1EnvironmentResourceProperties | None = None


class Gen2EnvironmentResource(EnvironmentResource):
    kind: EnvironmentKind | None = EnvironmentKind.GEN2
    properties: Gen2EnvironmentResourceProperties | None = None


def _kind_of(known: tuple[str, ...]):
    def discriminate(value: Any) -> str:
        if isinstance(value, Mapping):
            kind = value.get("kind")
        else:
            kind = getattr(value, "kind", None)
        kind = getattr(kind, "value", kind)
        return kind if kind in known else _OTHER

    return discriminate


AnyEnvironment = Annotated[
    Union[
        Annotated[Gen1EnvironmentResource, Tag(EnvironmentKind.GEN1.value)],
        Annotated[Gen2EnvironmentResource, Tag(EnvironmentKind.GEN2.value)],
        Annotated[EnvironmentResource, Tag(_OTHER)],
    ],
    Discriminator(_kind_of(("Gen1", "Gen2"))),
]


class EnvironmentListResponse(ArmModel):
    """All environments in a scope. Returned whole; there is no next page."""

    value: list[AnyEnvironment] | None = None


class Gen1EnvironmentCreationProperties(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("data_retention_time",)

    data_retention_time: str | None = None
    storage_limit_exceeded_behavior: StorageLimitExceededBehavior | None = None
    partition_key_properties: list[TimeSeriesIdProperty] | None = None


class Gen2EnvironmentCreationProperties(ArmModel):
    _required: ClassVar[tuple[str, ...]] = (
        "time_series_id_properties",
        "storage_configuration",
    )

    time_series_id_properties: list[TimeSeriesIdProperty] | None = None
    storage_configuration: Gen2StorageConfigurationInput | None = None
    warm_store_configuration: WarmStoreConfigurationProperties | None = None
    public_network_access: PublicNetworkAccess | None = None


class EnvironmentCreateOrUpdateParameters(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("location", "kind", "sku")

    location: str | None = None
    tags: dict[str, str] | None = None
    kind: EnvironmentKind | None = None
    sku: Sku | None = None


class Gen1EnvironmentCreateOrUpdateParameters(EnvironmentCreateOrUpdateParameters):
    _required: ClassVar[tuple[str, ...]] = ("location", "kind", "sku", "properties")

    kind: EnvironmentKind | None = EnvironmentKind.GEN1
    properties: Gen1EnvironmentCreationProperties | None = None


class Gen2EnvironmentCreateOrUpdateParameters(EnvironmentCreateOrUpdateParameters):
    _required: ClassVar[tuple[str, ...]] = ("location", "kind", "sku", "properties")

    kind: EnvironmentKind | None = EnvironmentKind.GEN2
    properties: Gen2EnvironmentCreationProperties | None = None


class Gen1EnvironmentMutableProperties(ArmModel):
    data_retention_time: str | None = None
    storage_limit_exceeded_behavior: StorageLimitExceededBehavior | None = None


class Gen2StorageConfigurationMutableProperties(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("management_key",)

    management_key: str | None = None


class Gen2EnvironmentMutableProperties(ArmModel):
    storage_configuration: Gen2StorageConfigurationMutableProperties | None = None
    warm_store_configuration: WarmStoreConfigurationProperties | None = None


class EnvironmentUpdateParameters(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("kind",)

    kind: EnvironmentKind | None = None
    tags: dict[str, str] | None = None


class Gen1EnvironmentUpdateParameters(EnvironmentUpdateParameters):
    kind: EnvironmentKind | None = EnvironmentKind.GEN1
    sku: Sku | None = None
    properties: Gen1EnvironmentMutableProperties | None = None


class Gen2EnvironmentUpdateParameters(EnvironmentUpdateParameters):
    kind: EnvironmentKind | None = EnvironmentKind.GEN2
    properties: Gen2EnvironmentMutableProperties | None = None


# -- event sources ------------------------------------------------------------


class LocalTimestampTimeZoneOffset(ArmModel):
    property_name: str | None = None


class LocalTimestamp(ArmModel):
    format: LocalTimestampFormat | None = None
    time_zone_offset: LocalTimestampTimeZoneOffset | None = None


class IngressStartAtProperties(ArmModel):
    type: IngressStartAtType | None = None
    time: str | None = None


class EventSourceCommonProperties(ArmModel):
    provisioning_state: ProvisioningState | None = None
    creation_time: datetime | None = None
    timestamp_property_name: str | None = None
    local_timestamp: LocalTimestamp | None = None
    ingress_start_at: IngressStartAtProperties | None = None


class EventHubEventSourceResourceProperties(EventSourceCommonProperties):
    event_source_resource_id: str | None = None
    service_bus_namespace: str | None = None
    event_hub_name: str | None = None
    consumer_group_name: str | None = None
    key_name: str | None = None


class IoTHubEventSourceResourceProperties(EventSourceCommonProperties):
    event_source_resource_id: str | None = None
    iot_hub_name: str | None = None
    consumer_group_name: str | None = None
    key_name: str | None = None


class EventSourceResource(TrackedResource):
    kind: EventSourceKind | None = None
    properties: dict[str, Any] | None = None


class EventHubEventSourceResource(EventSourceResource):
    kind: EventSourceKind | None = EventSourceKind.EVENT_HUB
    properties: EventHubEventSourceResourceProperties | None = None


class IoTHubEventSourceResource(EventSourceResource):
    kind: EventSourceKind | None = EventSourceKind.IOT_HUB
    properties: IoTHubEventSourceResourceProperties | None = None


AnyEventSource = Annotated[
    Union[
        Annotated[EventHubEventSourceResource, Tag(EventSourceKind.EVENT_HUB.value)],
        Annotated[IoTHubEventSourceResource, Tag(EventSourceKind.IOT_HUB.value)],
        Annotated[EventSourceResource, Tag(_OTHER)],
    ],
    Discriminator(_kind_of(("Microsoft.EventHub", "Microsoft.IoTHub"))),
]


class EventSourceListResponse(ArmModel):
    value: list[AnyEventSource] | None = None


class EventHubEventSourceCreationProperties(EventHubEventSourceResourceProperties):
    _required: ClassVar[tuple[str, ...]] = (
        "event_source_resource_id",
        "service_bus_namespace",
        "event_hub_name",
        "consumer_group_name",
        "key_name",
        "shared_access_key",
    )

    shared_access_key: str | None = None


class IoTHubEventSourceCreationProperties(IoTHubEventSourceResourceProperties):
    _required: ClassVar[tuple[str, ...]] = (
        "event_source_resource_id",
        "iot_hub_name",
        "consumer_group_name",
        "key_name",
        "shared_access_key",
    )

    shared_access_key: str | None = None


class EventSourceCreateOrUpdateParameters(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("location", "kind")

    location: str | None = None
    tags: dict[str, str] | None = None
    kind: EventSourceKind | None = None
    local_timestamp: LocalTimestamp | None = None


class EventHubEventSourceCreateOrUpdateParameters(EventSourceCreateOrUpdateParameters):
    _required: ClassVar[tuple[str, ...]] = ("location", "kind", "properties")

    kind: EventSourceKind | None = EventSourceKind.EVENT_HUB
    properties: EventHubEventSourceCreationProperties | None = None


class IoTHubEventSourceCreateOrUpdateParameters(EventSourceCreateOrUpdateParameters):
    _required: ClassVar[tuple[str, ...]] = ("location", "kind", "properties")

    kind: EventSourceKind | None = EventSourceKind.IOT_HUB
    properties: IoTHubEventSourceCreationProperties | None = None


class EventSourceMutableProperties(ArmModel):
    timestamp_property_name: str | None = None
    shared_access_key: str | None = None


class EventSourceUpdateParameters(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("kind",)

    kind: EventSourceKind | None = None
    tags: dict[str, str] | None = None


class EventHubEventSourceUpdateParameters(EventSourceUpdateParameters):
    kind: EventSourceKind | None = EventSourceKind.EVENT_HUB
    properties: EventSourceMutableProperties | None = None


class IoTHubEventSourceUpdateParameters(EventSourceUpdateParameters):
    kind: EventSourceKind | None = EventSourceKind.IOT_HUB
    properties: EventSourceMutableProperties | None = None


# -- decoding by kind ---------------------------------------------------------

_environment_adapter: TypeAdapter[EnvironmentResource] = TypeAdapter(AnyEnvironment)
_event_source_adapter: TypeAdapter[EventSourceResource] = TypeAdapter(AnyEventSource)


def _from_wire(adapter: TypeAdapter[Any], what: str, data: bytes | str | Mapping[str, Any]) -> Any:
    try:
        if isinstance(data, (bytes, str)):
            return adapter.validate_json(data, context=WIRE_CONTEXT)
        return adapter.validate_python(data, context=WIRE_CONTEXT)
    except ValidationError as exc:
        raise DecodeError(f"Cannot decode {what}: {exc}") from exc


def environment_from_wire(data: bytes | str | Mapping[str, Any]) -> EnvironmentResource:
    """Decode one environment as the class matching its ``kind``."""
    return _from_wire(_environment_adapter, "EnvironmentResource", data)


def event_source_from_wire(data: bytes | str | Mapping[str, Any]) -> EventSourceResource:
    """Decode one event source as the class matching its ``kind``."""
    return _from_wire(_event_source_adapter, "EventSourceResource", data)
