"""Async client for Microsoft.DeviceRegistry."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

import httpx

from armkit.client.paging import Pageable
from armkit.client.pipeline import ArmClient, OperationGroup, OperationResponse, decode
from armkit.models.base import ArmModel, ListResult
from armkit.models.resource import OperationListResult
from armkit.services.deviceregistry.models import (
    Asset,
    AssetEndpointProfile,
    AssetEndpointProfileListResult,
    AssetEndpointProfileUpdate,
    AssetListResult,
    AssetUpdate,
    SchemaRegistry,
    SchemaRegistryListResult,
)

API_VERSION = "2024-09-01-preview"

_PROVIDER = "/providers/Microsoft.DeviceRegistry"
_SUBSCRIPTION = "/subscriptions/{subscription_id}"
_RG = _SUBSCRIPTION + "/resourceGroups/{resource_group_name}"

R = TypeVar("R", bound=ArmModel)
L = TypeVar("L", bound=ListResult[Any])


class Operations(OperationGroup):
    def list(self) -> Pageable[OperationListResult]:
        url = self._client.url(f"{_PROVIDER}/operations")
        return self._client.paged("GET", url, OperationListResult)


class _TrackedResources(OperationGroup, Generic[R, L]):
    """CRUD and listing for one resource collection of the provider.

    Create, update and delete are long-running on the service side; only the
    first response is returned.
    """

    collection: ClassVar[str]
    resource_model: type[R]
    list_model: type[L]

    def _url(self, subscription_id: str, resource_group_name: str, name: str) -> httpx.URL:
        return self._client.url(
            f"{_RG}{_PROVIDER}/{self.collection}/{{name}}",
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            name=name,
        )

    async def get(self, subscription_id: str, resource_group_name: str, name: str) -> R:
        url = self._url(subscription_id, resource_group_name, name)
        return decode(await self._client.call("GET", url), self.resource_model)

    async def create_or_replace(
        self, subscription_id: str, resource_group_name: str, name: str, resource: R,
    ) -> OperationResponse[R]:
        """Create (201) or replace (200) the resource."""
        url = self._url(subscription_id, resource_group_name, name)
        response = await self._client.call(
            "PUT", url, body=resource, expected=(200, 201),
        )
        return OperationResponse(
            response.status_code, decode(response, self.resource_model),
        )

    async def delete(
        self, subscription_id: str, resource_group_name: str, name: str,
    ) -> OperationResponse[None]:
        url = self._url(subscription_id, resource_group_name, name)
        response = await self._client.call("DELETE", url, expected=(202, 204))
        return OperationResponse(response.status_code)

    def list_by_resource_group(
        self, subscription_id: str, resource_group_name: str,
    ) -> Pageable[L]:
        url = self._client.url(
            f"{_RG}{_PROVIDER}/{self.collection}",
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
        )
        return self._client.paged("GET", url, self.list_model)

    def list_by_subscription(self, subscription_id: str) -> Pageable[L]:
        url = self._client.url(
            f"{_SUBSCRIPTION}{_PROVIDER}/{self.collection}",
            subscription_id=subscription_id,
        )
        return self._client.paged("GET", url, self.list_model)

    async def _patch(
        self,
        subscription_id: str,
        resource_group_name: str,
        name: str,
        properties: ArmModel,
    ) -> OperationResponse[R]:
        url = self._url(subscription_id, resource_group_name, name)
        response = await self._client.call(
            "PATCH", url, body=properties, expected=(200, 202),
        )
        if response.status_code == 202:
            return OperationResponse(202)
        return OperationResponse(200, decode(response, self.resource_model))


class Assets(_TrackedResources[Asset, AssetListResult]):
    collection = "assets"
    resource_model = Asset
    list_model = AssetListResult

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        asset_name: str,
        properties: AssetUpdate,
    ) -> OperationResponse[Asset]:
        """Patch an asset. A 202 carries no body."""
        return await self._patch(subscription_id, resource_group_name, asset_name, properties)


class AssetEndpointProfiles(
    _TrackedResources[AssetEndpointProfile, AssetEndpointProfileListResult],
):
    collection = "assetEndpointProfiles"
    resource_model = AssetEndpointProfile
    list_model = AssetEndpointProfileListResult

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        asset_endpoint_profile_name: str,
        properties: AssetEndpointProfileUpdate,
    ) -> OperationResponse[AssetEndpointProfile]:
        return await self._patch(
            subscription_id, resource_group_name, asset_endpoint_profile_name, properties,
        )


class SchemaRegistries(_TrackedResources[SchemaRegistry, SchemaRegistryListResult]):
    collection = "schemaRegistries"
    resource_model = SchemaRegistry
    list_model = SchemaRegistryListResult


class DeviceRegistryClient(ArmClient):
    """Assets, asset endpoint profiles and schema registries."""

    api_version = API_VERSION

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.operations = Operations(self)
        self.assets = Assets(self)
        self.asset_endpoint_profiles = AssetEndpointProfiles(self)
        self.schema_registries = SchemaRegistries(self)
