"""Microsoft.CustomerInsights hub and connector schemas."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from armkit.models.base import ArmModel, ListResult
from armkit.models.enums import OpenEnum
from armkit.models.resource import ProxyResource, Resource


class ProvisioningState(OpenEnum):
    PROVISIONING = "Provisioning"
    SUCCEEDED = "Succeeded"
    EXPIRING = "Expiring"
    DELETING = "Deleting"
    HUMAN_INTERVENTION = "HumanIntervention"
    FAILED = "Failed"


class ConnectorType(OpenEnum):
    NONE = "None"
    CRM = "CRM"
    AZURE_BLOB = "AzureBlob"
    SALESFORCE = "Salesforce"
    EXCHANGE_ONLINE = "ExchangeOnline"
    OUTBOUND = "Outbound"


class ConnectorState(str, Enum):
    """Connector lifecycle. The service documents this set as closed."""

    CREATING = "Creating"
    CREATED = "Created"
    READY = "Ready"
    EXPIRING = "Expiring"
    DELETING = "Deleting"
    FAILED = "Failed"


class HubBillingInfoFormat(ArmModel):
    sku_name: str | None = None
    # One unit is 10,000 profiles and 100,000 interactions.
    min_units: int | None = None
    max_units: int | None = None


class HubPropertiesFormat(ArmModel):
    api_endpoint: str | None = None
    web_endpoint: str | None = None
    provisioning_state: ProvisioningState | None = None
    # Bit 0: graph enabled. Bit 1: hub disabled.
    tenant_features: int | None = None
    hub_billing_info: HubBillingInfoFormat | None = None


class Hub(Resource):
    """A Customer Insights hub."""

    location: str | None = None
    tags: dict[str, str] | None = None
    properties: HubPropertiesFormat | None = None


class HubListResult(ListResult[Hub]):
    pass


class Connector(ArmModel):
    """Properties of a connector."""

    _required: ClassVar[tuple[str, ...]] = ("connector_type", "connector_properties")

    connector_id: int | None = None
    connector_name: str | None = None
    connector_type: ConnectorType | None = None
    display_name: str | None = None
    description: str | None = None
    connector_properties: dict[str, Any] | None = None
    created: datetime | None = None
    last_modified: datetime | None = None
    state: ConnectorState | None = None
    tenant_id: str | None = None
    is_internal: bool | None = None


class ConnectorResourceFormat(ProxyResource):
    properties: Connector | None = None


class ConnectorListResult(ListResult[ConnectorResourceFormat]):
    pass
