"""Async client for Microsoft.HybridContainerService."""

from __future__ import annotations

from typing import Any

import httpx

from armkit.client.paging import Pageable
from armkit.client.pipeline import ArmClient, OperationGroup, OperationResponse, decode
from armkit.models.resource import OperationListResult
from armkit.services.hybridaks.models import (
    AgentPool,
    AgentPoolListResult,
    ProvisionedCluster,
    ProvisionedClusterListResult,
    VirtualNetwork,
    VirtualNetworksListResult,
    VirtualNetworksPatch,
)

API_VERSION = "2024-01-01"

_PROVIDER = "/providers/Microsoft.HybridContainerService"
# Provisioned clusters hang off the connected cluster's resource URI, which is
# inserted verbatim.
_INSTANCES = "/{connected_cluster_resource_uri}" + _PROVIDER + "/provisionedClusterInstances"
_INSTANCE = _INSTANCES + "/default"
_AGENT_POOLS = _INSTANCE + "/agentPools"
_RG = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}"


class Operations(OperationGroup):
    def list(self) -> Pageable[OperationListResult]:
        url = self._client.url(f"{_PROVIDER}/operations")
        return self._client.paged("GET", url, OperationListResult)


class ProvisionedClusterInstances(OperationGroup):
    def _url(self, connected_cluster_resource_uri: str, template: str = _INSTANCE) -> httpx.URL:
        return self._client.url(
            template, raw={"connected_cluster_resource_uri": connected_cluster_resource_uri},
        )

    async def get(self, connected_cluster_resource_uri: str) -> ProvisionedCluster:
        url = self._url(connected_cluster_resource_uri)
        return decode(await self._client.call("GET", url), ProvisionedCluster)

    async def create_or_update(
        self, connected_cluster_resource_uri: str, provisioned_cluster_instance: ProvisionedCluster,
    ) -> OperationResponse[ProvisionedCluster]:
        url = self._url(connected_cluster_resource_uri)
        response = await self._client.call(
            "PUT", url, body=provisioned_cluster_instance, expected=(200, 201),
        )
        return OperationResponse(response.status_code, decode(response, ProvisionedCluster))

    async def delete(self, connected_cluster_resource_uri: str) -> OperationResponse[None]:
        url = self._url(connected_cluster_resource_uri)
        response = await self._client.call("DELETE", url, expected=(200, 202, 204))
        return OperationResponse(response.status_code)

    def list(self, connected_cluster_resource_uri: str) -> Pageable[ProvisionedClusterListResult]:
        url = self._url(connected_cluster_resource_uri, _INSTANCES)
        return self._client.paged("GET", url, ProvisionedClusterListResult)


class AgentPools(OperationGroup):
    def _url(self, connected_cluster_resource_uri: str, agent_pool_name: str) -> httpx.URL:
        return self._client.url(
            _AGENT_POOLS + "/{agent_pool_name}",
            raw={"connected_cluster_resource_uri": connected_cluster_resource_uri},
            agent_pool_name=agent_pool_name,
        )

    async def get(self, connected_cluster_resource_uri: str, agent_pool_name: str) -> AgentPool:
        url = self._url(connected_cluster_resource_uri, agent_pool_name)
        return decode(await self._client.call("GET", url), AgentPool)

    async def create_or_update(
        self,
        connected_cluster_resource_uri: str,
        agent_pool_name: str,
        agent_pool: AgentPool,
    ) -> OperationResponse[AgentPool]:
        url = self._url(connected_cluster_resource_uri, agent_pool_name)
        response = await self._client.call(
            "PUT", url, body=agent_pool, expected=(200, 201),
        )
        return OperationResponse(response.status_code, decode(response, AgentPool))

    async def delete(
        self, connected_cluster_resource_uri: str, agent_pool_name: str,
    ) -> OperationResponse[None]:
        url = self._url(connected_cluster_resource_uri, agent_pool_name)
        response = await self._client.call("DELETE", url, expected=(200, 202, 204))
        return OperationResponse(response.status_code)

    def list_by_provisioned_cluster(
        self, connected_cluster_resource_uri: str,
    ) -> Pageable[AgentPoolListResult]:
        url = self._client.url(
            _AGENT_POOLS,
            raw={"connected_cluster_resource_uri": connected_cluster_resource_uri},
        )
        return self._client.paged("GET", url, AgentPoolListResult)


class VirtualNetworks(OperationGroup):
    def _url(
        self, subscription_id: str, resource_group_name: str, virtual_network_name: str,
    ) -> httpx.URL:
        return self._client.url(
            _RG + _PROVIDER + "/virtualNetworks/{virtual_network_name}",
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            virtual_network_name=virtual_network_name,
        )

    async def retrieve(
        self, subscription_id: str, resource_group_name: str, virtual_network_name: str,
    ) -> VirtualNetwork:
        url = self._url(subscription_id, resource_group_name, virtual_network_name)
        return decode(await self._client.call("GET", url), VirtualNetwork)

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        virtual_network_name: str,
        virtual_networks: VirtualNetwork,
    ) -> OperationResponse[VirtualNetwork]:
        url = self._url(subscription_id, resource_group_name, virtual_network_name)
        response = await self._client.call(
            "PUT", url, body=virtual_networks, expected=(200, 201),
        )
        return OperationResponse(response.status_code, decode(response, VirtualNetwork))

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        virtual_network_name: str,
        virtual_networks: VirtualNetworksPatch,
    ) -> OperationResponse[VirtualNetwork]:
        """Patch the tags of a virtual network. A 202 carries no body."""
        url = self._url(subscription_id, resource_group_name, virtual_network_name)
        response = await self._client.call(
            "PATCH", url, body=virtual_networks, expected=(200, 202),
        )
        if response.status_code == 202:
            return OperationResponse(202)
        return OperationResponse(200, decode(response, VirtualNetwork))

    async def delete(
        self, subscription_id: str, resource_group_name: str, virtual_network_name: str,
    ) -> OperationResponse[None]:
        url = self._url(subscription_id, resource_group_name, virtual_network_name)
        response = await self._client.call("DELETE", url, expected=(200, 202, 204))
        return OperationResponse(response.status_code)

    def list_by_resource_group(
        self, subscription_id: str, resource_group_name: str,
    ) -> Pageable[VirtualNetworksListResult]:
        url = self._client.url(
            _RG + _PROVIDER + "/virtualNetworks",
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
        )
        return self._client.paged("GET", url, VirtualNetworksListResult)

    def list_by_subscription(self, subscription_id: str) -> Pageable[VirtualNetworksListResult]:
        url = self._client.url(
            "/subscriptions/{subscription_id}" + _PROVIDER + "/virtualNetworks",
            subscription_id=subscription_id,
        )
        return self._client.paged("GET", url, VirtualNetworksListResult)


class HybridAksClient(ArmClient):
    """Provisioned clusters, agent pools and virtual networks on Azure Stack HCI."""

    api_version = API_VERSION

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.operations = Operations(self)
        self.provisioned_cluster_instances = ProvisionedClusterInstances(self)
        self.agent_pool = AgentPools(self)
        self.virtual_networks = VirtualNetworks(self)
