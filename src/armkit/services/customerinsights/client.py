"""Async client for Microsoft.CustomerInsights."""

from __future__ import annotations

from typing import Any

import httpx

from armkit.client.paging import Pageable
from armkit.client.pipeline import ArmClient, OperationGroup, OperationResponse, decode
from armkit.models.resource import OperationListResult
from armkit.services.customerinsights.models import (
    ConnectorListResult,
    ConnectorResourceFormat,
    Hub,
    HubListResult,
)

API_VERSION = "2017-04-26"

_PROVIDER = "/providers/Microsoft.CustomerInsights"
_RG = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}"
_HUBS = _RG + _PROVIDER + "/hubs"
_HUB = _HUBS + "/{hub_name}"
_CONNECTORS = _HUB + "/connectors"
_CONNECTOR = _CONNECTORS + "/{connector_name}"


class Operations(OperationGroup):
    def list(self) -> Pageable[OperationListResult]:
        """List the provider's REST operations."""
        url = self._client.url(f"{_PROVIDER}/operations")
        return self._client.paged("GET", url, OperationListResult)


class Hubs(OperationGroup):
    async def get(
        self, subscription_id: str, resource_group_name: str, hub_name: str,
    ) -> Hub:
        url = self._client.url(
            _HUB,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            hub_name=hub_name,
        )
        return decode(await self._client.call("GET", url), Hub)

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        hub_name: str,
        parameters: Hub,
    ) -> OperationResponse[Hub]:
        """Create a hub (201) or replace an existing one (200)."""
        url = self._client.url(
            _HUB,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            hub_name=hub_name,
        )
        response = await self._client.call(
            "PUT", url, body=parameters, expected=(200, 201),
        )
        return OperationResponse(response.status_code, decode(response, Hub))

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        hub_name: str,
        parameters: Hub,
    ) -> Hub:
        url = self._client.url(
            _HUB,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            hub_name=hub_name,
        )
        return decode(await self._client.call("PATCH", url, body=parameters), Hub)

    async def delete(
        self, subscription_id: str, resource_group_name: str, hub_name: str,
    ) -> OperationResponse[None]:
        url = self._client.url(
            _HUB,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            hub_name=hub_name,
        )
        response = await self._client.call("DELETE", url, expected=(200, 202, 204))
        return OperationResponse(response.status_code)

    def list_by_resource_group(
        self, subscription_id: str, resource_group_name: str,
    ) -> Pageable[HubListResult]:
        url = self._client.url(
            _HUBS,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
        )
        return self._client.paged("GET", url, HubListResult)

    def list(self, subscription_id: str) -> Pageable[HubListResult]:
        url = self._client.url(
            "/subscriptions/{subscription_id}" + _PROVIDER + "/hubs",
            subscription_id=subscription_id,
        )
        return self._client.paged("GET", url, HubListResult)


class Connectors(OperationGroup):
    def _url(
        self,
        subscription_id: str,
        resource_group_name: str,
        hub_name: str,
        connector_name: str,
    ) -> httpx.URL:
        return self._client.url(
            _CONNECTOR,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            hub_name=hub_name,
            connector_name=connector_name,
        )

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        hub_name: str,
        connector_name: str,
    ) -> ConnectorResourceFormat:
        url = self._url(subscription_id, resource_group_name, hub_name, connector_name)
        return decode(await self._client.call("GET", url), ConnectorResourceFormat)

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        hub_name: str,
        connector_name: str,
        parameters: ConnectorResourceFormat,
    ) -> OperationResponse[ConnectorResourceFormat]:
        """Create or update a connector.

        A 202 means the connector is still being provisioned and carries no
        body.
        """
        url = self._url(subscription_id, resource_group_name, hub_name, connector_name)
        response = await self._client.call(
            "PUT", url, body=parameters, expected=(200, 202),
        )
        if response.status_code == 202:
            return OperationResponse(202)
        return OperationResponse(200, decode(response, ConnectorResourceFormat))

    async def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        hub_name: str,
        connector_name: str,
    ) -> OperationResponse[None]:
        url = self._url(subscription_id, resource_group_name, hub_name, connector_name)
        response = await self._client.call("DELETE", url, expected=(200, 202, 204))
        return OperationResponse(response.status_code)

    def list_by_hub(
        self, subscription_id: str, resource_group_name: str, hub_name: str,
    ) -> Pageable[ConnectorListResult]:
        url = self._client.url(
            _CONNECTORS,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            hub_name=hub_name,
        )
        return self._client.paged("GET", url, ConnectorListResult)


class CustomerInsightsClient(ArmClient):
    """Hubs and connectors of Microsoft.CustomerInsights."""

    api_version = API_VERSION

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.operations = Operations(self)
        self.hubs = Hubs(self)
        self.connectors = Connectors(self)
