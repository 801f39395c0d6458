"""Kubernetes Configuration commands: Flux configurations."""

from __future__ import annotations

from typing import Annotated

import typer

from armkit.client.errors import error_handler
from armkit.commands._common import (
    EndpointOpt,
    FormatOpt,
    ProfileOpt,
    SubscriptionOpt,
    TokenOpt,
    open_client,
    resolve,
    rows_for,
    run,
)
from armkit.output.formatter import output
from armkit.services.kubernetesconfiguration import (
    FluxConfiguration,
    KubernetesConfigurationClient,
)

app = typer.Typer(name="k8sconfig", help="Microsoft.KubernetesConfiguration resources.")
flux_app = typer.Typer(name="flux", help="Flux configurations on a cluster.")
app.add_typer(flux_app, name="flux")

ResourceGroupArg = Annotated[str, typer.Argument(help="Resource group of the cluster")]
ClusterArg = Annotated[str, typer.Argument(help="Cluster name")]
ClusterRpOpt = Annotated[
    str,
    typer.Option("--cluster-rp", help="Cluster resource provider"),
]
ClusterTypeOpt = Annotated[
    str,
    typer.Option("--cluster-type", help="Cluster resource type"),
]


@flux_app.command("list")
@error_handler
def list_flux(
    resource_group: ResourceGroupArg,
    cluster: ClusterArg,
    cluster_rp: ClusterRpOpt = "Microsoft.Kubernetes",
    cluster_type: ClusterTypeOpt = "connectedClusters",
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List Flux configurations on a cluster."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> list[FluxConfiguration]:
        async with open_client(KubernetesConfigurationClient, settings) as client:
            pages = client.flux_configurations.list(
                subscription_id, resource_group, cluster_rp, cluster_type, cluster,
            )
            return await pages.collect()

    configs = run(fetch())
    rows = rows_for(
        configs,
        "name",
        "properties.source_kind",
        "properties.namespace",
        "properties.compliance_state",
        "properties.provisioning_state",
    )
    output(
        configs,
        fmt,
        columns=["Name", "Source", "Namespace", "Compliance", "State"],
        rows=rows,
        title=f"Flux configurations on {cluster}",
    )


@flux_app.command()
@error_handler
def show(
    resource_group: ResourceGroupArg,
    cluster: ClusterArg,
    name: Annotated[str, typer.Argument(help="Flux configuration name")],
    cluster_rp: ClusterRpOpt = "Microsoft.Kubernetes",
    cluster_type: ClusterTypeOpt = "connectedClusters",
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    subscription: SubscriptionOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one Flux configuration."""
    settings, subscription_id = resolve(profile, endpoint, token, subscription)

    async def fetch() -> FluxConfiguration:
        async with open_client(KubernetesConfigurationClient, settings) as client:
            return await client.flux_configurations.get(
                subscription_id, resource_group, cluster_rp, cluster_type, cluster, name,
            )

    output(run(fetch()), fmt, kv=True, title=f"Flux configuration: {name}")
