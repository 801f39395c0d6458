"""Microsoft.EdgeOrder, API version 2021-12-01."""

from armkit.services.edgeorder.client import API_VERSION, EdgeOrderClient
from armkit.services.edgeorder.models import (
    ActionStatus,
    AddressDetails,
    AddressProperties,
    AddressResource,
    AddressResourceList,
    AddressType,
    AddressUpdateParameter,
    AddressValidationStatus,
    CancellationReason,
    ContactDetails,
    HierarchyInformation,
    OrderItemDetails,
    OrderItemProperties,
    OrderItemResource,
    OrderItemResourceList,
    OrderItemType,
    OrderItemUpdateParameter,
    OrderProperties,
    OrderResource,
    OrderResourceList,
    ProductDetails,
    ProductFamilies,
    ProductFamiliesRequest,
    ProductFamily,
    ReturnOrderItemDetails,
    ShippingAddress,
    StageDetails,
    StageName,
    StageStatus,
)

__all__ = [
    "API_VERSION",
    "ActionStatus",
    "AddressDetails",
    "AddressProperties",
    "AddressResource",
    "AddressResourceList",
    "AddressType",
    "AddressUpdateParameter",
    "AddressValidationStatus",
    "CancellationReason",
    "ContactDetails",
    "EdgeOrderClient",
    "HierarchyInformation",
    "OrderItemDetails",
    "OrderItemProperties",
    "OrderItemResource",
    "OrderItemResourceList",
    "OrderItemType",
    "OrderItemUpdateParameter",
    "OrderProperties",
    "OrderResource",
    "OrderResourceList",
    "ProductDetails",
    "ProductFamilies",
    "ProductFamiliesRequest",
    "ProductFamily",
    "ReturnOrderItemDetails",
    "ShippingAddress",
    "StageDetails",
    "StageName",
    "StageStatus",
]
