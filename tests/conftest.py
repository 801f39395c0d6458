"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from armkit.client.auth import StaticTokenCredential
from armkit.config.constants import (
    ENV_ENDPOINT,
    ENV_PROFILE,
    ENV_SUBSCRIPTION_ID,
    ENV_TOKEN,
)
from armkit.config.manager import ConfigManager
from armkit.config.models import ArmProfile

ENDPOINT = "https://management.azure.com"
SUBSCRIPTION = "00000000-0000-0000-0000-000000000001"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ARMKIT_* settings out of tests."""
    for name in (ENV_ENDPOINT, ENV_PROFILE, ENV_SUBSCRIPTION_ID, ENV_TOKEN):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ArmProfile:
    """Return a sample profile for testing."""
    return ArmProfile(
        name="test-arm",
        endpoint=ENDPOINT,
        subscription_id=SUBSCRIPTION,
        token="test-token-value",
    )


@pytest.fixture
def credential() -> StaticTokenCredential:
    return StaticTokenCredential("test-token")


@pytest.fixture
def mock_hub() -> dict:
    """Sample Customer Insights hub (matches GET .../hubs/{name})."""
    return {
        "id": f"/subscriptions/{SUBSCRIPTION}/resourceGroups/rg/providers/Microsoft.CustomerInsights/hubs/hub1",
        "name": "hub1",
        "type": "Microsoft.CustomerInsights/hubs",
        "location": "westus",
        "tags": {"env": "test"},
        "properties": {
            "apiEndpoint": "https://hub1.api.ci.ai.dynamics.com",
            "webEndpoint": "https://hub1.ci.ai.dynamics.com",
            "provisioningState": "Succeeded",
            "tenantFeatures": 0,
            "hubBillingInfo": {"skuName": "B0", "minUnits": 1, "maxUnits": 5},
        },
    }
