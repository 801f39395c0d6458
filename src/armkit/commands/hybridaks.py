"""Hybrid AKS commands: virtual networks."""

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
from armkit.services.hybridaks import HybridAksClient, VirtualNetwork

app = typer.Typer(name="hybridaks", help="Microsoft.HybridContainerService resources.")
vnets_app = typer.Typer(name="vnets", help="Virtual networks for provisioned clusters.")
app.add_typer(vnets_app, name="vnets")


@vnets_app.command("list")
@error_handler
def list_vnets(
    resource_group: ResourceGroupOpt = None,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List virtual networks in a resource group, or in the whole subscription."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> list[VirtualNetwork]:
        async with open_client(HybridAksClient, settings) as client:
            vnets = client.virtual_networks
            if resource_group:
                pages = vnets.list_by_resource_group(subscription_id, resource_group)
            else:
                pages = vnets.list_by_subscription(subscription_id)
            return await pages.collect()

    networks = run(fetch())
    rows = rows_for(
        networks,
        "name",
        "location",
        "properties.ip_address_prefix",
        "properties.vlan_id",
        "properties.provisioning_state",
    )
    output(
        networks,
        fmt,
        columns=["Name", "Location", "Prefix", "VLAN", "State"],
        rows=rows,
        title="Virtual Networks",
    )


@vnets_app.command()
@error_handler
def show(
    resource_group: Annotated[str, typer.Argument(help="Resource group")],
    name: Annotated[str, typer.Argument(help="Virtual network name")],
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one virtual network."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> VirtualNetwork:
        async with open_client(HybridAksClient, settings) as client:
            return await client.virtual_networks.retrieve(
                subscription_id, resource_group, name,
            )

    output(run(fetch()), fmt, kv=True, title=f"Virtual network: {name}")
