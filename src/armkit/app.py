"""Root Typer app: global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from armkit import __version__
from armkit.commands import (
    config_cmd,
    customerinsights,
    deviceregistry,
    edgeorder,
    hybridaks,
    k8sconfig,
    tsi,
)
from armkit.config.constants import DEFAULT_LOG_LEVEL
from armkit.log import LOG_LEVELS, setup_logging

app = typer.Typer(
    name="armkit",
    help="CLI for Azure Resource Manager resource providers.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"armkit {__version__}")
        raise typer.Exit()


def log_level_callback(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}")
    return level


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL, "--log-level", "-l", envvar="ARMKIT_LOG_LEVEL",
        callback=log_level_callback,
        help="Log level for request tracing on stderr.",
    ),
) -> None:
    """armkit: inspect and manage ARM resources from the terminal."""
    setup_logging(log_level)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(customerinsights.app, name="customerinsights")
app.add_typer(deviceregistry.app, name="deviceregistry")
app.add_typer(edgeorder.app, name="edgeorder")
app.add_typer(hybridaks.app, name="hybridaks")
app.add_typer(k8sconfig.app, name="k8sconfig")
app.add_typer(tsi.app, name="tsi")


def main() -> None:
    app()
