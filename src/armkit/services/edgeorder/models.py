"""Microsoft.EdgeOrder address, order and order item schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from armkit.models.base import ArmModel, ListResult
from armkit.models.enums import OpenEnum
from armkit.models.resource import ErrorDetail, ProxyResource, TrackedResource


class AddressType(OpenEnum):
    NONE = "None"
    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"


class AddressValidationStatus(OpenEnum):
    VALID = "Valid"
    INVALID = "Invalid"
    AMBIGUOUS = "Ambiguous"


class OrderItemType(OpenEnum):
    PURCHASE = "Purchase"
    RENTAL = "Rental"


class StageName(OpenEnum):
    PLACED = "Placed"
    IN_REVIEW = "InReview"
    CONFIRMED = "Confirmed"
    READY_TO_SHIP = "ReadyToShip"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    IN_USE = "InUse"
    RETURN_INITIATED = "ReturnInitiated"
    RETURN_PICKED_UP = "ReturnPickedUp"
    RETURNED_TO_MICROSOFT = "ReturnedToMicrosoft"
    RETURN_COMPLETED = "ReturnCompleted"
    CANCELLED = "Cancelled"


class NotificationStageName(OpenEnum):
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


class StageStatus(OpenEnum):
    NONE = "None"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELLED = "Cancelled"
    CANCELLING = "Cancelling"


class ActionStatus(OpenEnum):
    """Whether an action such as deletion is currently allowed."""

    ALLOWED = "Allowed"
    NOT_ALLOWED = "NotAllowed"


class CancellationStatus(OpenEnum):
    CANCELLABLE = "Cancellable"
    CANCELLABLE_WITH_FEE = "CancellableWithFee"
    NOT_CANCELLABLE = "NotCancellable"


class ReturnStatus(OpenEnum):
    RETURNABLE = "Returnable"
    RETURNABLE_WITH_FEE = "ReturnableWithFee"
    NOT_RETURNABLE = "NotReturnable"


# -- addresses -----------------------------------------------------------------


class ShippingAddress(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("street_address1", "country")

    street_address1: str | None = None
    street_address2: str | None = None
    street_address3: str | None = None
    city: str | None = None
    state_or_province: str | None = None
    country: str | None = None
    postal_code: str | None = None
    zip_extended_code: str | None = None
    company_name: str | None = None
    address_type: AddressType | None = None


class ContactDetails(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("contact_name", "phone", "email_list")

    contact_name: str | None = None
    phone: str | None = None
    phone_extension: str | None = None
    mobile: str | None = None
    email_list: list[str] | None = None


class AddressProperties(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("contact_details",)

    shipping_address: ShippingAddress | None = None
    contact_details: ContactDetails | None = None
    address_validation_status: AddressValidationStatus | None = None


class AddressResource(TrackedResource):
    _required: ClassVar[tuple[str, ...]] = ("location", "properties")

    properties: AddressProperties | None = None


class AddressUpdateProperties(ArmModel):
    shipping_address: ShippingAddress | None = None
    contact_details: ContactDetails | None = None


class AddressUpdateParameter(ArmModel):
    properties: AddressUpdateProperties | None = None
    tags: dict[str, str] | None = None


class AddressResourceList(ListResult[AddressResource]):
    pass


# -- orders --------------------------------------------------------------------


class StageDetails(ArmModel):
    stage_status: StageStatus | None = None
    stage_name: StageName | None = None
    display_name: str | None = None
    start_time: datetime | None = None


class OrderProperties(ArmModel):
    """Read-only view of an order; order items carry the detail."""

    order_item_ids: list[str] | None = None
    current_stage: StageDetails | None = None
    order_stage_history: list[StageDetails] | None = None


class OrderResource(ProxyResource):
    _required: ClassVar[tuple[str, ...]] = ("properties",)

    properties: OrderProperties | None = None


class OrderResourceList(ListResult[OrderResource]):
    pass


# -- order items ---------------------------------------------------------------


class HierarchyInformation(ArmModel):
    product_family_name: str | None = None
    product_line_name: str | None = None
    product_name: str | None = None
    configuration_name: str | None = None


class DisplayInfo(ArmModel):
    product_family_display_name: str | None = None
    configuration_display_name: str | None = None


class DeviceDetails(ArmModel):
    serial_number: str | None = None
    management_resource_id: str | None = None
    management_resource_tenant_id: str | None = None


class ProductDetails(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("hierarchy_information",)

    display_info: DisplayInfo | None = None
    hierarchy_information: HierarchyInformation | None = None
    count: int | None = None
    product_double_encryption_status: str | None = None
    device_details: list[DeviceDetails] | None = None


class NotificationPreference(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("stage_name", "send_notification")

    stage_name: NotificationStageName | None = None
    send_notification: bool | None = None


class Preferences(ArmModel):
    notification_preferences: list[NotificationPreference] | None = None
    transport_preferences: dict[str, Any] | None = None
    encryption_preferences: dict[str, Any] | None = None
    management_resource_preferences: dict[str, Any] | None = None


class ResourceProviderDetails(ArmModel):
    resource_provider_namespace: str | None = None


class OrderItemDetails(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("product_details", "order_item_type")

    product_details: ProductDetails | None = None
    order_item_type: OrderItemType | None = None
    current_stage: StageDetails | None = None
    order_item_stage_history: list[StageDetails] | None = None
    preferences: Preferences | None = None
    forward_shipping_details: dict[str, Any] | None = None
    reverse_shipping_details: dict[str, Any] | None = None
    notification_email_list: list[str] | None = None
    cancellation_reason: str | None = None
    cancellation_status: CancellationStatus | None = None
    deletion_status: ActionStatus | None = None
    return_reason: str | None = None
    return_status: ReturnStatus | None = None
    management_rp_details: ResourceProviderDetails | None = None
    management_rp_details_list: list[ResourceProviderDetails] | None = None
    error: ErrorDetail | None = None


class AddressDetails(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("forward_address",)

    forward_address: AddressProperties | None = None
    return_address: AddressProperties | None = None


class OrderItemProperties(ArmModel):
    _required: ClassVar[tuple[str, ...]] = (
        "order_item_details", "address_details", "order_id",
    )

    order_item_details: OrderItemDetails | None = None
    address_details: AddressDetails | None = None
    start_time: datetime | None = None
    order_id: str | None = None


class OrderItemResource(TrackedResource):
    _required: ClassVar[tuple[str, ...]] = ("location", "properties")

    properties: OrderItemProperties | None = None


class OrderItemUpdateProperties(ArmModel):
    forward_address: AddressProperties | None = None
    preferences: Preferences | None = None
    notification_email_list: list[str] | None = None


class OrderItemUpdateParameter(ArmModel):
    properties: OrderItemUpdateProperties | None = None
    tags: dict[str, str] | None = None


class OrderItemResourceList(ListResult[OrderItemResource]):
    pass


class CancellationReason(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("reason",)

    reason: str | None = None


class ReturnOrderItemDetails(ArmModel):
    _required: ClassVar[tuple[str, ...]] = ("return_reason",)

    return_address: AddressProperties | None = None
    return_reason: str | None = None
    service_tag: str | None = None
    shipping_box_required: bool | None = None


# -- catalog -------------------------------------------------------------------


class ProductFamiliesRequest(ArmModel):
    """Filter for the product catalog, keyed by Azure region or country."""

    _required: ClassVar[tuple[str, ...]] = ("filterable_properties",)

    filterable_properties: dict[str, Any] | None = None
    customer_subscription_details: dict[str, Any] | None = None


class ProductFamilyProperties(ArmModel):
    display_name: str | None = None
    description: dict[str, Any] | None = None
    image_information: list[dict[str, Any]] | None = None
    cost_information: dict[str, Any] | None = None
    availability_information: dict[str, Any] | None = None
    hierarchy_information: HierarchyInformation | None = None
    filterable_properties: list[dict[str, Any]] | None = None
    product_lines: list[dict[str, Any]] | None = None
    resource_provider_details: list[ResourceProviderDetails] | None = None


class ProductFamily(ArmModel):
    properties: ProductFamilyProperties | None = None


class ProductFamilies(ListResult[ProductFamily]):
    pass
