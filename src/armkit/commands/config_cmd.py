"""Config commands: manage endpoint profiles."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Annotated, Optional

import typer
from azure.core.credentials import AccessToken
from azure.core.exceptions import ClientAuthenticationError
from rich.console import Console
from rich.prompt import Confirm, Prompt

from armkit.client.auth import resolve_credential
from armkit.client.errors import ConfigurationError, error_handler
from armkit.config.constants import DEFAULT_ENDPOINT, default_scopes
from armkit.config.manager import ConfigManager
from armkit.config.models import ArmProfile
from armkit.output.formatter import output

app = typer.Typer(name="config", help="Manage endpoint profiles and CLI configuration.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _mask(token: str) -> str:
    return token[:8] + "..." if len(token) > 8 else "***"


@app.command()
@error_handler
def init() -> None:
    """Interactive setup wizard: create your first profile."""
    mgr = _get_manager()
    console.print("[bold]armkit setup[/]\n")

    name = Prompt.ask("Profile name", default="default")
    endpoint = Prompt.ask("Management endpoint", default=DEFAULT_ENDPOINT)
    subscription_id = Prompt.ask("Subscription ID", default=None)
    token = Prompt.ask(
        "Bearer token (leave empty to use DefaultAzureCredential)", default=None,
    )
    verify_ssl = Confirm.ask("Verify SSL certificates?", default=True)

    profile = ArmProfile(
        name=name,
        endpoint=endpoint,
        subscription_id=subscription_id or None,
        token=token or None,
        verify_ssl=verify_ssl,
    )
    mgr.add_profile(profile)
    console.print(f"\n[green]Profile '{name}' saved.[/]")
    console.print(f"Config file: {mgr.config_path}")


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    endpoint: Annotated[str, typer.Option("--endpoint", "-e", help="Management endpoint")] = DEFAULT_ENDPOINT,
    subscription_id: Annotated[Optional[str], typer.Option("--subscription", "-s", help="Default subscription ID")] = None,
    token: Annotated[Optional[str], typer.Option("--token", "-t", help="Pre-issued bearer token")] = None,
    scope: Annotated[Optional[list[str]], typer.Option("--scope", help="OAuth scope (repeatable)")] = None,
    timeout: Annotated[Optional[float], typer.Option("--timeout", help="Request timeout in seconds")] = None,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add or replace a profile."""
    mgr = _get_manager()
    fields = {"timeout": timeout} if timeout is not None else {}
    profile = ArmProfile(
        name=name,
        endpoint=endpoint,
        subscription_id=subscription_id,
        token=token,
        scopes=scope or None,
        verify_ssl=not no_verify_ssl,
        **fields,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'armkit config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "Endpoint", "Subscription", "Auth", "Default"]
    rows = []
    for name, p in profiles.items():
        auth = "token" if p.auth_configured else "azure-identity"
        is_default = "*" if name == default else ""
        rows.append([name, p.endpoint, p.subscription_id, auth, is_default])

    data = []
    for p in profiles.values():
        entry = p.model_dump(exclude_none=True)
        if "token" in entry:
            entry["token"] = _mask(entry["token"])
        data.append(entry)
    output(data, fmt, columns=columns, rows=rows, title="Profiles")


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(exclude_none=True)
    if "token" in data:
        data["token"] = _mask(data["token"])

    output(data, fmt, kv=True, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Check that a token can be acquired for a profile."""
    mgr = _get_manager()
    profile = mgr.resolve_profile(profile_name=name)
    scopes = profile.scopes or default_scopes(profile.endpoint)
    console.print(f"Requesting a token for [bold]{' '.join(scopes)}[/]...")

    async def acquire() -> AccessToken:
        credential = resolve_credential(profile)
        try:
            return await credential.get_token(*scopes)
        except ClientAuthenticationError as exc:
            raise ConfigurationError(f"Could not acquire a token: {exc.message}") from exc
        finally:
            await credential.close()

    token = asyncio.run(acquire())
    expires = datetime.fromtimestamp(token.expires_on, tz=timezone.utc)
    console.print(f"[green]Token acquired.[/] Expires {expires:%Y-%m-%d %H:%M} UTC")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force:
        if not Confirm.ask(f"Remove profile '{name}'?"):
            console.print("Cancelled.")
            return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
