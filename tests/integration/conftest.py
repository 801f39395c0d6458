"""Fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from loguru import logger

from armkit.config.manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path):
    """Point every command at an empty temp config file."""
    manager = ConfigManager(config_path=tmp_path / "config.toml")
    with patch("armkit.commands._common.ConfigManager", return_value=manager), \
            patch("armkit.commands.config_cmd._get_manager", return_value=manager):
        yield manager


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop the stderr sink the CLI installs on the runner's stream."""
    yield
    logger.remove()
    logger.disable("armkit")


@pytest.fixture(autouse=True)
def _wide_terminal(monkeypatch: pytest.MonkeyPatch):
    """Keep rich from wrapping CLI error panels at the default 80 columns."""
    monkeypatch.setenv("COLUMNS", "200")
