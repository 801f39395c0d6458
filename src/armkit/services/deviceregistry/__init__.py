"""Microsoft.DeviceRegistry, API version 2024-09-01-preview."""

from armkit.services.deviceregistry.client import API_VERSION, DeviceRegistryClient
from armkit.services.deviceregistry.models import (
    Asset,
    AssetEndpointProfile,
    AssetEndpointProfileListResult,
    AssetEndpointProfileProperties,
    AssetEndpointProfileUpdate,
    AssetListResult,
    AssetProperties,
    AssetStatus,
    AssetUpdate,
    Authentication,
    AuthenticationMethod,
    DataPoint,
    DataPointObservabilityMode,
    Dataset,
    Event,
    EventObservabilityMode,
    ProvisioningState,
    SchemaRegistry,
    SchemaRegistryListResult,
    SchemaRegistryProperties,
    Topic,
    TopicRetainType,
    UsernamePasswordCredentials,
    X509Credentials,
)

__all__ = [
    "API_VERSION",
    "Asset",
    "AssetEndpointProfile",
    "AssetEndpointProfileListResult",
    "AssetEndpointProfileProperties",
    "AssetEndpointProfileUpdate",
    "AssetListResult",
    "AssetProperties",
    "AssetStatus",
    "AssetUpdate",
    "Authentication",
    "AuthenticationMethod",
    "DataPoint",
    "DataPointObservabilityMode",
    "Dataset",
    "DeviceRegistryClient",
    "Event",
    "EventObservabilityMode",
    "ProvisioningState",
    "SchemaRegistry",
    "SchemaRegistryListResult",
    "SchemaRegistryProperties",
    "Topic",
    "TopicRetainType",
    "UsernamePasswordCredentials",
    "X509Credentials",
]
