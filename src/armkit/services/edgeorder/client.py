"""Async client for Microsoft.EdgeOrder.

Unlike the other providers, every operation lives directly on the client.
"""

from __future__ import annotations

import httpx

from armkit.client.paging import Pageable
from armkit.client.pipeline import ArmClient, OperationResponse, decode
from armkit.models.resource import OperationListResult
from armkit.services.edgeorder.models import (
    AddressResource,
    AddressResourceList,
    AddressUpdateParameter,
    CancellationReason,
    OrderItemResource,
    OrderItemResourceList,
    OrderItemUpdateParameter,
    OrderResource,
    OrderResourceList,
    ProductFamilies,
    ProductFamiliesRequest,
    ReturnOrderItemDetails,
)

API_VERSION = "2021-12-01"

_PROVIDER = "/providers/Microsoft.EdgeOrder"
_SUBSCRIPTION = "/subscriptions/{subscription_id}" + _PROVIDER
_RG = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}" + _PROVIDER
_ADDRESS = _RG + "/addresses/{address_name}"
_ORDER_ITEM = _RG + "/orderItems/{order_item_name}"


class EdgeOrderClient(ArmClient):
    """Addresses, orders and order items of Microsoft.EdgeOrder."""

    api_version = API_VERSION

    def list_operations(self) -> Pageable[OperationListResult]:
        return self.paged("GET", self.url(f"{_PROVIDER}/operations"), OperationListResult)

    # -- subscription level ---------------------------------------------------

    def list_addresses_at_subscription_level(
        self,
        subscription_id: str,
        *,
        filter: str | None = None,
        skip_token: str | None = None,
    ) -> Pageable[AddressResourceList]:
        url = self.url(f"{_SUBSCRIPTION}/addresses", subscription_id=subscription_id)
        return self.paged(
            "GET", url, AddressResourceList,
            params={"$filter": filter, "$skipToken": skip_token},
        )

    def list_product_families(
        self,
        subscription_id: str,
        product_families_request: ProductFamiliesRequest,
        *,
        expand: str | None = None,
        skip_token: str | None = None,
    ) -> Pageable[ProductFamilies]:
        """List the product catalog. This is a POST carrying the filter."""
        url = self.url(f"{_SUBSCRIPTION}/listProductFamilies", subscription_id=subscription_id)
        return self.paged(
            "POST", url, ProductFamilies,
            params={"$expand": expand, "$skipToken": skip_token},
            body=product_families_request,
        )

    def list_order_at_subscription_level(
        self, subscription_id: str, *, skip_token: str | None = None,
    ) -> Pageable[OrderResourceList]:
        url = self.url(f"{_SUBSCRIPTION}/orders", subscription_id=subscription_id)
        return self.paged("GET", url, OrderResourceList, params={"$skipToken": skip_token})

    def list_order_items_at_subscription_level(
        self,
        subscription_id: str,
        *,
        filter: str | None = None,
        expand: str | None = None,
        skip_token: str | None = None,
    ) -> Pageable[OrderItemResourceList]:
        url = self.url(f"{_SUBSCRIPTION}/orderItems", subscription_id=subscription_id)
        return self.paged(
            "GET", url, OrderItemResourceList,
            params={"$filter": filter, "$expand": expand, "$skipToken": skip_token},
        )

    # -- addresses ------------------------------------------------------------

    def list_addresses_at_resource_group_level(
        self,
        subscription_id: str,
        resource_group_name: str,
        *,
        filter: str | None = None,
        skip_token: str | None = None,
    ) -> Pageable[AddressResourceList]:
        url = self.url(
            f"{_RG}/addresses",
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
        )
        return self.paged(
            "GET", url, AddressResourceList,
            params={"$filter": filter, "$skipToken": skip_token},
        )

    def _address_url(
        self, subscription_id: str, resource_group_name: str, address_name: str,
    ) -> httpx.URL:
        return self.url(
            _ADDRESS,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            address_name=address_name,
        )

    async def get_address_by_name(
        self, subscription_id: str, resource_group_name: str, address_name: str,
    ) -> AddressResource:
        url = self._address_url(subscription_id, resource_group_name, address_name)
        return decode(await self.call("GET", url), AddressResource)

    async def create_address(
        self,
        subscription_id: str,
        resource_group_name: str,
        address_name: str,
        address_resource: AddressResource,
    ) -> OperationResponse[AddressResource]:
        url = self._address_url(subscription_id, resource_group_name, address_name)
        response = await self.call(
            "PUT", url, body=address_resource, expected=(200, 202),
        )
        if response.status_code == 202:
            return OperationResponse(202)
        return OperationResponse(200, decode(response, AddressResource))

    async def update_address(
        self,
        subscription_id: str,
        resource_group_name: str,
        address_name: str,
        address_update_parameter: AddressUpdateParameter,
        *,
        if_match: str | None = None,
    ) -> OperationResponse[AddressResource]:
        """Patch an address. *if_match* is the ETag the update is conditional on."""
        url = self._address_url(subscription_id, resource_group_name, address_name)
        response = await self.call(
            "PATCH", url,
            headers={"If-Match": if_match},
            body=address_update_parameter,
            expected=(200, 202),
        )
        if response.status_code == 202:
            return OperationResponse(202)
        return OperationResponse(200, decode(response, AddressResource))

    async def delete_address_by_name(
        self, subscription_id: str, resource_group_name: str, address_name: str,
    ) -> OperationResponse[None]:
        url = self._address_url(subscription_id, resource_group_name, address_name)
        response = await self.call("DELETE", url, expected=(200, 202, 204))
        return OperationResponse(response.status_code)

    # -- orders ---------------------------------------------------------------

    def list_order_at_resource_group_level(
        self,
        subscription_id: str,
        resource_group_name: str,
        *,
        skip_token: str | None = None,
    ) -> Pageable[OrderResourceList]:
        url = self.url(
            f"{_RG}/orders",
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
        )
        return self.paged("GET", url, OrderResourceList, params={"$skipToken": skip_token})

    async def get_order_by_name(
        self,
        subscription_id: str,
        resource_group_name: str,
        location: str,
        order_name: str,
    ) -> OrderResource:
        url = self.url(
            f"{_RG}/locations/{{location}}/orders/{{order_name}}",
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            location=location,
            order_name=order_name,
        )
        return decode(await self.call("GET", url), OrderResource)

    # -- order items ----------------------------------------------------------

    def list_order_items_at_resource_group_level(
        self,
        subscription_id: str,
        resource_group_name: str,
        *,
        filter: str | None = None,
        expand: str | None = None,
        skip_token: str | None = None,
    ) -> Pageable[OrderItemResourceList]:
        url = self.url(
            f"{_RG}/orderItems",
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
        )
        return self.paged(
            "GET", url, OrderItemResourceList,
            params={"$filter": filter, "$expand": expand, "$skipToken": skip_token},
        )

    def _order_item_url(
        self,
        subscription_id: str,
        resource_group_name: str,
        order_item_name: str,
        action: str = "",
    ) -> httpx.URL:
        return self.url(
            _ORDER_ITEM + action,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            order_item_name=order_item_name,
        )

    async def get_order_item_by_name(
        self,
        subscription_id: str,
        resource_group_name: str,
        order_item_name: str,
        *,
        expand: str | None = None,
    ) -> OrderItemResource:
        """Get an order item.

        *expand* takes a comma separated list of ``deviceDetails``,
        ``forwardShippingDetails`` and ``reverseShippingDetails``.
        """
        url = self._order_item_url(subscription_id, resource_group_name, order_item_name)
        response = await self.call("GET", url, params={"$expand": expand})
        return decode(response, OrderItemResource)

    async def create_order_item(
        self,
        subscription_id: str,
        resource_group_name: str,
        order_item_name: str,
        order_item_resource: OrderItemResource,
    ) -> OperationResponse[OrderItemResource]:
        url = self._order_item_url(subscription_id, resource_group_name, order_item_name)
        response = await self.call(
            "PUT", url, body=order_item_resource, expected=(200, 202),
        )
        if response.status_code == 202:
            return OperationResponse(202)
        return OperationResponse(200, decode(response, OrderItemResource))

    async def update_order_item(
        self,
        subscription_id: str,
        resource_group_name: str,
        order_item_name: str,
        order_item_update_parameter: OrderItemUpdateParameter,
        *,
        if_match: str | None = None,
    ) -> OperationResponse[OrderItemResource]:
        url = self._order_item_url(subscription_id, resource_group_name, order_item_name)
        response = await self.call(
            "PATCH", url,
            headers={"If-Match": if_match},
            body=order_item_update_parameter,
            expected=(200, 202),
        )
        if response.status_code == 202:
            return OperationResponse(202)
        return OperationResponse(200, decode(response, OrderItemResource))

    async def delete_order_item_by_name(
        self, subscription_id: str, resource_group_name: str, order_item_name: str,
    ) -> OperationResponse[None]:
        url = self._order_item_url(subscription_id, resource_group_name, order_item_name)
        response = await self.call("DELETE", url, expected=(200, 202, 204))
        return OperationResponse(response.status_code)

    async def cancel_order_item(
        self,
        subscription_id: str,
        resource_group_name: str,
        order_item_name: str,
        cancellation_reason: CancellationReason,
    ) -> OperationResponse[None]:
        url = self._order_item_url(
            subscription_id, resource_group_name, order_item_name, "/cancel",
        )
        response = await self.call(
            "POST", url, body=cancellation_reason, expected=(200, 204),
        )
        return OperationResponse(response.status_code)

    async def return_order_item(
        self,
        subscription_id: str,
        resource_group_name: str,
        order_item_name: str,
        return_order_item_details: ReturnOrderItemDetails,
    ) -> OperationResponse[None]:
        url = self._order_item_url(
            subscription_id, resource_group_name, order_item_name, "/return",
        )
        response = await self.call(
            "POST", url, body=return_order_item_details, expected=(200, 202),
        )
        return OperationResponse(response.status_code)
