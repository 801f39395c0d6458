"""Time Series Insights commands: environments."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from armkit.client.errors import error_handler
from armkit.commands._common import (
    EndpointOpt,
    FormatOpt,
    ProfileOpt,
    ResourceGroupOpt,
    SubscriptionOpt,
    TokenOpt,
    open_client,
    resolve,
    rows_for,
    run,
)
from armkit.output.formatter import output
from armkit.services.timeseriesinsights import (
    EnvironmentResource,
    TimeSeriesInsightsClient,
)

app = typer.Typer(name="tsi", help="Microsoft.TimeSeriesInsights resources.")
environments_app = typer.Typer(name="environments", help="Time Series Insights environments.")
app.add_typer(environments_app, name="environments")


@environments_app.command("list")
@error_handler
def list_environments(
    resource_group: ResourceGroupOpt = None,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List environments in a resource group, or in the whole subscription."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> list[EnvironmentResource]:
        async with open_client(TimeSeriesInsightsClient, settings) as client:
            if resource_group:
                result = await client.environments.list_by_resource_group(
                    subscription_id, resource_group,
                )
            else:
                result = await client.environments.list_by_subscription(subscription_id)
            return list(result.value or [])

    environments = run(fetch())
    rows = rows_for(environments, "name", "kind", "location", "sku.name", "sku.capacity")
    output(
        environments,
        fmt,
        columns=["Name", "Kind", "Location", "SKU", "Capacity"],
        rows=rows,
        title="Environments",
    )


@environments_app.command()
@error_handler
def show(
    resource_group: Annotated[str, typer.Argument(help="Resource group")],
    name: Annotated[str, typer.Argument(help="Environment name")],
    expand: Annotated[Optional[str], typer.Option("--expand", help="Extra detail to include, e.g. 'status'")] = None,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one environment."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> EnvironmentResource:
        async with open_client(TimeSeriesInsightsClient, settings) as client:
            return await client.environments.get(
                subscription_id, resource_group, name, expand=expand,
            )

    output(run(fetch()), fmt, kv=True, title=f"Environment: {name}")
