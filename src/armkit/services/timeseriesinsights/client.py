"""Async client for Microsoft.TimeSeriesInsights."""

from __future__ import annotations

from typing import Any

import httpx

from armkit.client.errors import DecodeError
from armkit.client.paging import Pageable
from armkit.client.pipeline import ArmClient, OperationGroup, OperationResponse, decode
from armkit.models.resource import OperationListResult
from armkit.services.timeseriesinsights.models import (
    EnvironmentCreateOrUpdateParameters,
    EnvironmentListResponse,
    EnvironmentResource,
    EnvironmentUpdateParameters,
    EventSourceCreateOrUpdateParameters,
    EventSourceListResponse,
    EventSourceResource,
    EventSourceUpdateParameters,
    environment_from_wire,
    event_source_from_wire,
)

API_VERSION = "2021-03-31-preview"

_PROVIDER = "/providers/Microsoft.TimeSeriesInsights"
_RG = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}"
_ENVIRONMENTS = _RG + _PROVIDER + "/environments"
_ENVIRONMENT = _ENVIRONMENTS + "/{environment_name}"
_EVENT_SOURCES = _ENVIRONMENT + "/eventSources"
_EVENT_SOURCE = _EVENT_SOURCES + "/{event_source_name}"


def _body(response: httpx.Response) -> bytes:
    if not response.content:
        raise DecodeError(f"Empty {response.status_code} response")
    return response.content


class Operations(OperationGroup):
    def list(self) -> Pageable[OperationListResult]:
        url = self._client.url(f"{_PROVIDER}/operations")
        return self._client.paged("GET", url, OperationListResult)


class Environments(OperationGroup):
    def _url(
        self, subscription_id: str, resource_group_name: str, environment_name: str,
    ) -> httpx.URL:
        return self._client.url(
            _ENVIRONMENT,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            environment_name=environment_name,
        )

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        environment_name: str,
        *,
        expand: str | None = None,
    ) -> EnvironmentResource:
        """Fetch an environment, decoded as Gen1 or Gen2 by its ``kind``.

        ``expand="status"`` asks the service to include ingress and warm
        storage status.
        """
        url = self._url(subscription_id, resource_group_name, environment_name)
        response = await self._client.call("GET", url, params={"$expand": expand})
        return environment_from_wire(_body(response))

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        environment_name: str,
        parameters: EnvironmentCreateOrUpdateParameters,
    ) -> OperationResponse[EnvironmentResource]:
        url = self._url(subscription_id, resource_group_name, environment_name)
        response = await self._client.call(
            "PUT", url, body=parameters, expected=(200, 201),
        )
        return OperationResponse(
            response.status_code, environment_from_wire(_body(response)),
        )

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        environment_name: str,
        parameters: EnvironmentUpdateParameters,
    ) -> EnvironmentResource:
        url = self._url(subscription_id, resource_group_name, environment_name)
        response = await self._client.call("PATCH", url, body=parameters)
        return environment_from_wire(_body(response))

    async def delete(
        self, subscription_id: str, resource_group_name: str, environment_name: str,
    ) -> OperationResponse[None]:
        url = self._url(subscription_id, resource_group_name, environment_name)
        response = await self._client.call("DELETE", url, expected=(200, 204))
        return OperationResponse(response.status_code)

    async def list_by_resource_group(
        self, subscription_id: str, resource_group_name: str,
    ) -> EnvironmentListResponse:
        url = self._client.url(
            _ENVIRONMENTS,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
        )
        return decode(await self._client.call("GET", url), EnvironmentListResponse)

    async def list_by_subscription(self, subscription_id: str) -> EnvironmentListResponse:
        url = self._client.url(
            "/subscriptions/{subscription_id}" + _PROVIDER + "/environments",
            subscription_id=subscription_id,
        )
        return decode(await self._client.call("GET", url), EnvironmentListResponse)


class EventSources(OperationGroup):
    def _url(
        self,
        subscription_id: str,
        resource_group_name: str,
        environment_name: str,
        event_source_name: str,
    ) -> httpx.URL:
        return self._client.url(
            _EVENT_SOURCE,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            environment_name=environment_name,
            event_source_name=event_source_name,
        )

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        environment_name: str,
        event_source_name: str,
    ) -> EventSourceResource:
        url = self._url(
            subscription_id, resource_group_name, environment_name, event_source_name,
        )
        return event_source_from_wire(_body(await self._client.call("GET", url)))

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        environment_name: str,
        event_source_name: str,
        parameters: EventSourceCreateOrUpdateParameters,
    ) -> OperationResponse[EventSourceResource]:
        url = self._url(
            subscription_id, resource_group_name, environment_name, event_source_name,
        )
        response = await self._client.call(
            "PUT", url, body=parameters, expected=(200, 201),
        )
        return OperationResponse(
            response.status_code, event_source_from_wire(_body(response)),
        )

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        environment_name: str,
        event_source_name: str,
        parameters: EventSourceUpdateParameters,
    ) -> EventSourceResource:
        url = self._url(
            subscription_id, resource_group_name, environment_name, event_source_name,
        )
        response = await self._client.call("PATCH", url, body=parameters)
        return event_source_from_wire(_body(response))

    async def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        environment_name: str,
        event_source_name: str,
    ) -> OperationResponse[None]:
        url = self._url(
            subscription_id, resource_group_name, environment_name, event_source_name,
        )
        response = await self._client.call("DELETE", url, expected=(200, 204))
        return OperationResponse(response.status_code)

    async def list_by_environment(
        self, subscription_id: str, resource_group_name: str, environment_name: str,
    ) -> EventSourceListResponse:
        url = self._client.url(
            _EVENT_SOURCES,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            environment_name=environment_name,
        )
        return decode(await self._client.call("GET", url), EventSourceListResponse)


class TimeSeriesInsightsClient(ArmClient):
    """Environments and event sources of Microsoft.TimeSeriesInsights.

    List operations here return the whole collection in one response.
    """

    api_version = API_VERSION

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.operations = Operations(self)
        self.environments = Environments(self)
        self.event_sources = EventSources(self)
