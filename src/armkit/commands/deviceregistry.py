"""Device Registry commands: assets."""

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
from armkit.services.deviceregistry import Asset, DeviceRegistryClient

app = typer.Typer(name="deviceregistry", help="Microsoft.DeviceRegistry resources.")
assets_app = typer.Typer(name="assets", help="Industrial assets.")
app.add_typer(assets_app, name="assets")


@assets_app.command("list")
@error_handler
def list_assets(
    resource_group: ResourceGroupOpt = None,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List assets in a resource group, or in the whole subscription."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> list[Asset]:
        async with open_client(DeviceRegistryClient, settings) as client:
            if resource_group:
                pages = client.assets.list_by_resource_group(subscription_id, resource_group)
            else:
                pages = client.assets.list_by_subscription(subscription_id)
            return await pages.collect()

    assets = run(fetch())
    rows = rows_for(
        assets,
        "name",
        "location",
        "properties.asset_endpoint_profile_ref",
        "properties.enabled",
        "properties.provisioning_state",
    )
    output(
        assets,
        fmt,
        columns=["Name", "Location", "Endpoint Profile", "Enabled", "State"],
        rows=rows,
        title="Assets",
    )


@assets_app.command()
@error_handler
def show(
    resource_group: Annotated[str, typer.Argument(help="Resource group")],
    name: Annotated[str, typer.Argument(help="Asset name")],
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one asset."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> Asset:
        async with open_client(DeviceRegistryClient, settings) as client:
            return await client.assets.get(subscription_id, resource_group, name)

    output(run(fetch()), fmt, kv=True, title=f"Asset: {name}")
