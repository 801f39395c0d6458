"""Customer Insights commands: hubs."""

from __future__ import annotations

from typing import Annotated

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
from armkit.services.customerinsights import CustomerInsightsClient, Hub

app = typer.Typer(name="customerinsights", help="Microsoft.CustomerInsights resources.")
hubs_app = typer.Typer(name="hubs", help="Customer Insights hubs.")
app.add_typer(hubs_app, name="hubs")

_COLUMNS = ["Name", "Location", "State", "API Endpoint"]
_FIELDS = ("name", "location", "properties.provisioning_state", "properties.api_endpoint")


@hubs_app.command("list")
@error_handler
def list_hubs(
    resource_group: ResourceGroupOpt = None,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List hubs in a resource group, or in the whole subscription."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> list[Hub]:
        async with open_client(CustomerInsightsClient, settings) as client:
            if resource_group:
                pages = client.hubs.list_by_resource_group(subscription_id, resource_group)
            else:
                pages = client.hubs.list(subscription_id)
            return await pages.collect()

    hubs = run(fetch())
    output(hubs, fmt, columns=_COLUMNS, rows=rows_for(hubs, *_FIELDS), title="Hubs")


@hubs_app.command()
@error_handler
def show(
    resource_group: Annotated[str, typer.Argument(help="Resource group")],
    name: Annotated[str, typer.Argument(help="Hub name")],
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one hub."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> Hub:
        async with open_client(CustomerInsightsClient, settings) as client:
            return await client.hubs.get(subscription_id, resource_group, name)

    output(run(fetch()), fmt, kv=True, title=f"Hub: {name}")
