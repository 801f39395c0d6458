"""Microsoft.TimeSeriesInsights, API version 2021-03-31-preview."""

from armkit.services.timeseriesinsights.client import (
    API_VERSION,
    TimeSeriesInsightsClient,
)
from armkit.services.timeseriesinsights.models import (
    EnvironmentKind,
    EnvironmentListResponse,
    EnvironmentResource,
    EventHubEventSourceCreateOrUpdateParameters,
    EventHubEventSourceResource,
    EventSourceKind,
    EventSourceListResponse,
    EventSourceResource,
    Gen1EnvironmentCreateOrUpdateParameters,
    Gen1EnvironmentResource,
    Gen1EnvironmentUpdateParameters,
    Gen2EnvironmentCreateOrUpdateParameters,
    Gen2EnvironmentResource,
    Gen2EnvironmentUpdateParameters,
    IoTHubEventSourceCreateOrUpdateParameters,
    IoTHubEventSourceResource,
    Sku,
    SkuName,
    environment_from_wire,
    event_source_from_wire,
)

__all__ = [
    "API_VERSION",
    "EnvironmentKind",
    "EnvironmentListResponse",
    "EnvironmentResource",
    "EventHubEventSourceCreateOrUpdateParameters",
    "EventHubEventSourceResource",
    "EventSourceKind",
    "EventSourceListResponse",
    "EventSourceResource",
    "Gen1EnvironmentCreateOrUpdateParameters",
    "Gen1EnvironmentResource",
    "Gen1EnvironmentUpdateParameters",
    "Gen2EnvironmentCreateOrUpdateParameters",
    "Gen2EnvironmentResource",
    "Gen2EnvironmentUpdateParameters",
    "IoTHubEventSourceCreateOrUpdateParameters",
    "IoTHubEventSourceResource",
    "Sku",
    "SkuName",
    "TimeSeriesInsightsClient",
    "environment_from_wire",
    "event_source_from_wire",
]
