"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "armkit"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_ENDPOINT = "ARMKIT_ENDPOINT"
ENV_TOKEN = "ARMKIT_TOKEN"
ENV_SUBSCRIPTION_ID = "ARMKIT_SUBSCRIPTION_ID"
ENV_PROFILE = "ARMKIT_PROFILE"

# Client defaults
DEFAULT_ENDPOINT = "https://management.azure.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_LOG_LEVEL = "WARNING"


def default_scopes(endpoint: str) -> list[str]:
    """OAuth scopes granting access to the whole management endpoint."""
    return [f"{endpoint.rstrip('/')}/.default"]
