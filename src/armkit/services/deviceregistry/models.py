"""Microsoft.DeviceRegistry asset, endpoint profile and schema registry schemas."""

from __future__ import annotations

from typing import Any, ClassVar

from armkit.models.base import ArmModel, ListResult
from armkit.models.enums import OpenEnum
from armkit.models.resource import ExtendedLocation, TrackedResource


class ProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    ACCEPTED = "Accepted"
    DELETING = "Deleting"


class AuthenticationMethod(OpenEnum):
    ANONYMOUS = "Anonymous"
    CERTIFICATE = "Certificate"
    USERNAME_PASSWORD = "UsernamePassword"


class DataPointObservabilityMode(OpenEnum):
    NONE = "None"
    COUNTER = "Counter"
    GAUGE = "Gauge"
    HISTOGRAM = "Histogram"
    LOG = "Log"


class EventObservabilityMode(OpenEnum):
    NONE = "None"
    LOG = "Log"


class TopicRetainType(OpenEnum):
    KEEP = "Keep"
    NEVER = "Never"


class SystemAssignedServiceIdentityType(OpenEnum):
    NONE = "None"
    SYSTEM_ASSIGNED = "SystemAssigned"


class Topic(ArmModel):
    """MQTT topic a dataset or event is published to."""

    _required: ClassVar[tuple[str, ...]] = ("path",)

    path: str | None = None
    retain: TopicRetainType | None = None


class TopicUpdate(ArmModel):
    path: str | None = None
    retain: TopicRetainType | None = None


class DataPoint(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("name", "data_source")

    name: str | None = None
    data_source: str | None = None
    data_point_configuration: str | None = None
    observability_mode: DataPointObservabilityMode | None = None


class Dataset(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("name",)

    name: str | None = None
    dataset_configuration: str | None = None
    topic: Topic | None = None
    data_points: list[DataPoint] | None = None


class Event(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("name", "event_notifier")

    name: str | None = None
    event_notifier: str | None = None
    event_configuration: str | None = None
    topic: Topic | None = None
    observability_mode: EventObservabilityMode | None = None


class MessageSchemaReference(ArmModel):
    _required: ClassVar[tuple[str, ...]] = (
        "schema_registry_namespace", "schema_name", "schema_version",
    )

    schema_registry_namespace: str | None = None
    schema_name: str | None = None
    schema_version: str | None = None


class StatusError(ArmModel):
    code: int | None = None
    message: str | None = None


class AssetStatusDataset(ArmModel):
    name: str | None = None
    message_schema_reference: MessageSchemaReference | None = None


class AssetStatusEvent(ArmModel):
    name: str | None = None
    message_schema_reference: MessageSchemaReference | None = None


class AssetStatus(ArmModel):
    """Status reported by the edge, read-only."""

    errors: list[StatusError] | None = None
    version: int | None = None
    datasets: list[AssetStatusDataset] | None = None
    events: list[AssetStatusEvent] | None = None


class AssetProperties(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("asset_endpoint_profile_ref",)

    uuid: str | None = None
    enabled: bool | None = None
    external_asset_id: str | None = None
    display_name: str | None = None
    description: str | None = None
    asset_endpoint_profile_ref: str | None = None
    version: int | None = None
    manufacturer: str | None = None
    manufacturer_uri: str | None = None
    model: str | None = None
    product_code: str | None = None
    hardware_revision: str | None = None
    software_revision: str | None = None
    documentation_uri: str | None = None
    serial_number: str | None = None
    attributes: dict[str, Any] | None = None
    discovered_asset_refs: list[str] | None = None
    default_datasets_configuration: str | None = None
    default_events_configuration: str | None = None
    default_topic: Topic | None = None
    datasets: list[Dataset] | None = None
    events: list[Event] | None = None
    status: AssetStatus | None = None
    provisioning_state: ProvisioningState | None = None


class Asset(TrackedResource):
    """An asset bound to a custom location."""

    _required: ClassVar[tuple[str, ...]] = ("location", "extended_location")

    properties: AssetProperties | None = None
    extended_location: ExtendedLocation | None = None


class AssetUpdateProperties(ArmModel):
    enabled: bool | None = None
    display_name: str | None = None
    description: str | None = None
    manufacturer: str | None = None
    manufacturer_uri: str | None = None
    model: str | None = None
    product_code: str | None = None
    hardware_revision: str | None = None
    software_revision: str | None = None
    documentation_uri: str | None = None
    serial_number: str | None = None
    attributes: dict[str, Any] | None = None
    default_datasets_configuration: str | None = None
    default_events_configuration: str | None = None
    default_topic: TopicUpdate | None = None
    datasets: list[Dataset] | None = None
    events: list[Event] | None = None


class AssetUpdate(ArmModel):
    tags: dict[str, str] | None = None
    properties: AssetUpdateProperties | None = None


class AssetListResult(ListResult[Asset]):
    pass


class UsernamePasswordCredentials(ArmModel):
    _required: ClassVar[tuple[str, ...]] = (
        "username_secret_name", "password_secret_name",
    )

    username_secret_name: str | None = None
    password_secret_name: str | None = None


class X509Credentials(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("certificate_secret_name",)

    certificate_secret_name: str | None = None


class Authentication(ArmModel):
    """How the connector authenticates against the asset endpoint."""

    _required: ClassVar[tuple[str, ...]] = ("method",)

    method: AuthenticationMethod | None = None
    username_password_credentials: UsernamePasswordCredentials | None = None
    x509_credentials: X509Credentials | None = None


class AssetEndpointProfileStatus(ArmModel):
    errors: list[StatusError] | None = None


class AssetEndpointProfileProperties(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("target_address", "endpoint_profile_type")

    uuid: str | None = None
    target_address: str | None = None
    endpoint_profile_type: str | None = None
    authentication: Authentication | None = None
    additional_configuration: str | None = None
    discovered_asset_endpoint_profile_ref: str | None = None
    status: AssetEndpointProfileStatus | None = None
    provisioning_state: ProvisioningState | None = None


class AssetEndpointProfile(TrackedResource):
    _required: ClassVar[tuple[str, ...]] = ("location", "extended_location")

    properties: AssetEndpointProfileProperties | None = None
    extended_location: ExtendedLocation | None = None


class AuthenticationUpdate(ArmModel):
    method: AuthenticationMethod | None = None
    username_password_credentials: UsernamePasswordCredentials | None = None
    x509_credentials: X509Credentials | None = None


class AssetEndpointProfileUpdateProperties(ArmModel):
    target_address: str | None = None
    endpoint_profile_type: str | None = None
    authentication: AuthenticationUpdate | None = None
    additional_configuration: str | None = None


class AssetEndpointProfileUpdate(ArmModel):
    tags: dict[str, str] | None = None
    properties: AssetEndpointProfileUpdateProperties | None = None


class AssetEndpointProfileListResult(ListResult[AssetEndpointProfile]):
    pass


class SystemAssignedServiceIdentity(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("type",)

    principal_id: str | None = None
    tenant_id: str | None = None
    type: SystemAssignedServiceIdentityType | None = None


class SchemaRegistryProperties(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("namespace", "storage_account_container_url")

    uuid: str | None = None
    namespace: str | None = None
    display_name: str | None = None
    description: str | None = None
    storage_account_container_url: str | None = None
    provisioning_state: ProvisioningState | None = None


class SchemaRegistry(TrackedResource):
    properties: SchemaRegistryProperties | None = None
    identity: SystemAssignedServiceIdentity | None = None


class SchemaRegistryListResult(ListResult[SchemaRegistry]):
    pass
