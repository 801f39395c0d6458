"""Edge Order commands: orders."""

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
from armkit.services.edgeorder import EdgeOrderClient, OrderResource

app = typer.Typer(name="edgeorder", help="Microsoft.EdgeOrder resources.")
orders_app = typer.Typer(name="orders", help="Hardware orders.")
app.add_typer(orders_app, name="orders")


@orders_app.command("list")
@error_handler
def list_orders(
    resource_group: ResourceGroupOpt = None,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List orders in a resource group, or in the whole subscription."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> list[OrderResource]:
        async with open_client(EdgeOrderClient, settings) as client:
            if resource_group:
                pages = client.list_order_at_resource_group_level(
                    subscription_id, resource_group,
                )
            else:
                pages = client.list_order_at_subscription_level(subscription_id)
            return await pages.collect()

    orders = run(fetch())
    rows = rows_for(
        orders,
        "name",
        "properties.current_stage.stage_name",
        "properties.current_stage.stage_status",
    )
    for row, order in zip(rows, orders):
        row.append(len(order.properties.order_item_ids or []) if order.properties else 0)
    output(
        orders,
        fmt,
        columns=["Name", "Stage", "Status", "Items"],
        rows=rows,
        title="Orders",
    )


@orders_app.command()
@error_handler
def show(
    resource_group: Annotated[str, typer.Argument(help="Resource group")],
    location: Annotated[str, typer.Argument(help="Azure location of the order")],
    name: Annotated[str, typer.Argument(help="Order name")],
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one order."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> OrderResource:
        async with open_client(EdgeOrderClient, settings) as client:
            return await client.get_order_by_name(
                subscription_id, resource_group, location, name,
            )

    output(run(fetch()), fmt, kv=True, title=f"Order: {name}")
