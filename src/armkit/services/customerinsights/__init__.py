"""Microsoft.CustomerInsights, API version 2017-04-26."""

from armkit.services.customerinsights.client import API_VERSION, CustomerInsightsClient
from armkit.services.customerinsights.models import (
    Connector,
    ConnectorListResult,
    ConnectorResourceFormat,
    ConnectorState,
    ConnectorType,
    Hub,
    HubBillingInfoFormat,
    HubListResult,
    HubPropertiesFormat,
    ProvisioningState,
)

__all__ = [
    "API_VERSION",
    "Connector",
    "ConnectorListResult",
    "ConnectorResourceFormat",
    "ConnectorState",
    "ConnectorType",
    "CustomerInsightsClient",
    "Hub",
    "HubBillingInfoFormat",
    "HubListResult",
    "HubPropertiesFormat",
    "ProvisioningState",
]
