"""Async client for Microsoft.KubernetesConfiguration.

Every resource here is an extension of a Kubernetes cluster, addressed by the
cluster's resource provider (``Microsoft.ContainerService`` or
``Microsoft.Kubernetes``), its resource type (``managedClusters``,
``connectedClusters`` or ``provisionedClusters``) and its name.
"""

from __future__ import annotations

from typing import Any

import httpx

from armkit.client.paging import Pageable
from armkit.client.pipeline import ArmClient, OperationGroup, OperationResponse, decode
from armkit.models.resource import OperationListResult
from armkit.services.kubernetesconfiguration.models import (
    Extension,
    ExtensionsList,
    FluxConfiguration,
    FluxConfigurationPatch,
    FluxConfigurationsList,
    PatchExtension,
)

API_VERSION = "2022-04-02-preview"

_CLUSTER = (
    "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}"
    "/providers/{cluster_rp}/{cluster_resource_name}/{cluster_name}"
    "/providers/Microsoft.KubernetesConfiguration"
)


class Operations(OperationGroup):
    def list(self) -> Pageable[OperationListResult]:
        url = self._client.url("/providers/Microsoft.KubernetesConfiguration/operations")
        return self._client.paged("GET", url, OperationListResult)


class _ClusterExtensionGroup(OperationGroup):
    collection: str

    def _url(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
        name: str | None = None,
    ) -> httpx.URL:
        params = {
            "subscription_id": subscription_id,
            "resource_group_name": resource_group_name,
            "cluster_rp": cluster_rp,
            "cluster_resource_name": cluster_resource_name,
            "cluster_name": cluster_name,
        }
        template = f"{_CLUSTER}/{self.collection}"
        if name is not None:
            template += "/{name}"
            params["name"] = name
        return self._client.url(template, **params)


class FluxConfigurations(_ClusterExtensionGroup):
    collection = "fluxConfigurations"

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
        flux_configuration_name: str,
    ) -> FluxConfiguration:
        url = self._url(
            subscription_id, resource_group_name, cluster_rp, cluster_resource_name,
            cluster_name, flux_configuration_name,
        )
        return decode(await self._client.call("GET", url), FluxConfiguration)

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
        flux_configuration_name: str,
        flux_configuration: FluxConfiguration,
    ) -> OperationResponse[FluxConfiguration]:
        url = self._url(
            subscription_id, resource_group_name, cluster_rp, cluster_resource_name,
            cluster_name, flux_configuration_name,
        )
        response = await self._client.call(
            "PUT", url, body=flux_configuration, expected=(200, 201),
        )
        return OperationResponse(response.status_code, decode(response, FluxConfiguration))

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
        flux_configuration_name: str,
        flux_configuration_patch: FluxConfigurationPatch,
    ) -> FluxConfiguration:
        """Patch a Flux configuration. The service accepts with 202."""
        url = self._url(
            subscription_id, resource_group_name, cluster_rp, cluster_resource_name,
            cluster_name, flux_configuration_name,
        )
        response = await self._client.call(
            "PATCH", url, body=flux_configuration_patch, expected=(202,),
        )
        return decode(response, FluxConfiguration)

    async def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
        flux_configuration_name: str,
        *,
        force_delete: bool | None = None,
    ) -> OperationResponse[None]:
        """Delete a Flux configuration.

        With *force_delete* the resource is removed from Azure without waiting
        for the cluster to clean up.
        """
        url = self._url(
            subscription_id, resource_group_name, cluster_rp, cluster_resource_name,
            cluster_name, flux_configuration_name,
        )
        response = await self._client.call(
            "DELETE", url, params={"forceDelete": force_delete}, expected=(200, 202, 204),
        )
        return OperationResponse(response.status_code)

    def list(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
    ) -> Pageable[FluxConfigurationsList]:
        url = self._url(
            subscription_id, resource_group_name, cluster_rp, cluster_resource_name,
            cluster_name,
        )
        return self._client.paged("GET", url, FluxConfigurationsList)


class Extensions(_ClusterExtensionGroup):
    collection = "extensions"

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
        extension_name: str,
    ) -> Extension:
        url = self._url(
            subscription_id, resource_group_name, cluster_rp, cluster_resource_name,
            cluster_name, extension_name,
        )
        return decode(await self._client.call("GET", url), Extension)

    async def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
        extension_name: str,
        extension: Extension,
    ) -> OperationResponse[Extension]:
        url = self._url(
            subscription_id, resource_group_name, cluster_rp, cluster_resource_name,
            cluster_name, extension_name,
        )
        response = await self._client.call(
            "PUT", url, body=extension, expected=(200, 201),
        )
        return OperationResponse(response.status_code, decode(response, Extension))

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
        extension_name: str,
        patch_extension: PatchExtension,
    ) -> Extension:
        url = self._url(
            subscription_id, resource_group_name, cluster_rp, cluster_resource_name,
            cluster_name, extension_name,
        )
        response = await self._client.call(
            "PATCH", url, body=patch_extension, expected=(202,),
        )
        return decode(response, Extension)

    async def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
        extension_name: str,
        *,
        force_delete: bool | None = None,
    ) -> OperationResponse[None]:
        url = self._url(
            subscription_id, resource_group_name, cluster_rp, cluster_resource_name,
            cluster_name, extension_name,
        )
        response = await self._client.call(
            "DELETE", url, params={"forceDelete": force_delete}, expected=(200, 202, 204),
        )
        return OperationResponse(response.status_code)

    def list(
        self,
        subscription_id: str,
        resource_group_name: str,
        cluster_rp: str,
        cluster_resource_name: str,
        cluster_name: str,
    ) -> Pageable[ExtensionsList]:
        url = self._url(
            subscription_id, resource_group_name, cluster_rp, cluster_resource_name,
            cluster_name,
        )
        return self._client.paged("GET", url, ExtensionsList)


class KubernetesConfigurationClient(ArmClient):
    """Flux configurations and cluster extensions."""

    api_version = API_VERSION

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.operations = Operations(self)
        self.flux_configurations = FluxConfigurations(self)
        self.extensions = Extensions(self)
