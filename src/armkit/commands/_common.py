"""Shared helpers for CLI commands: client factory, options, row building."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Coroutine, Sequence
from contextlib import asynccontextmanager
from typing import Annotated, Any, TypeVar

import typer

from armkit.client.auth import resolve_credential
from armkit.client.errors import ConfigurationError
from armkit.client.pipeline import ArmClient
from armkit.config.manager import ConfigManager
from armkit.config.models import ArmProfile
from armkit.models.base import ArmModel

C = TypeVar("C", bound=ArmClient)
T = TypeVar("T")

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Config profile"),
]
EndpointOpt = Annotated[
    str | None,
    typer.Option("--endpoint", help="Management endpoint override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="Bearer token override"),
]
SubscriptionOpt = Annotated[
    str | None,
    typer.Option("--subscription", "-s", help="Subscription ID override"),
]
ResourceGroupOpt = Annotated[
    str | None,
    typer.Option("--resource-group", "-g", help="Resource group (omit to list the subscription)"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]


def resolve(
    profile: str | None,
    endpoint: str | None,
    token: str | None,
    subscription: str | None,
) -> tuple[ArmProfile, str]:
    """Resolve connection settings and the subscription to act on."""
    resolved = ConfigManager().resolve_profile(
        profile_name=profile,
        endpoint=endpoint,
        token=token,
        subscription_id=subscription,
    )
    if not resolved.subscription_id:
        raise ConfigurationError(
            "No subscription ID. Pass --subscription, set ARMKIT_SUBSCRIPTION_ID "
            "or add one to the profile."
        )
    return resolved, resolved.subscription_id


def make_client(client_cls: type[C], profile: ArmProfile) -> C:
    """Create a service client from a resolved profile."""
    builder = (
        client_cls.builder(resolve_credential(profile))
        .endpoint(profile.endpoint)
        .timeout(profile.timeout)
        .verify(profile.verify_ssl)
    )
    if profile.scopes:
        builder = builder.scopes(profile.scopes)
    return builder.build()


@asynccontextmanager
async def open_client(client_cls: type[C], profile: ArmProfile) -> AsyncIterator[C]:
    """Yield a client and close it and its credential afterwards."""
    client = make_client(client_cls, profile)
    try:
        yield client
    finally:
        await client.aclose()
        await client.credential.close()


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run one command's async body to completion."""
    return asyncio.run(coro)


def rows_for(
    items: Sequence[ArmModel], *fields: str,
) -> list[list[Any]]:
    """Build table rows from dotted attribute paths (``properties.state``)."""
    rows = []
    for item in items:
        row = []
        for path in fields:
            value: Any = item
            for part in path.split("."):
                value = getattr(value, part, None) if value is not None else None
            row.append(value)
        rows.append(row)
    return rows
