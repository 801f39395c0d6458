"""Configuration manager: read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w
from loguru import logger

from armkit.client.errors import ConfigurationError
from armkit.config.constants import (
    CONFIG_FILE,
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    ENV_ENDPOINT,
    ENV_PROFILE,
    ENV_SUBSCRIPTION_ID,
    ENV_TOKEN,
)
from armkit.config.models import ArmProfile, CLIConfig

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk and resolves endpoint profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        logger.debug(f"Loading config from {self.config_path}")
        try:
            data = tomllib.loads(self.config_path.read_bytes().decode())
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(
                f"Invalid config file {self.config_path}: {exc}"
            ) from exc
        profiles: dict[str, ArmProfile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = ArmProfile(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Tokens live in this file: owner-only
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.default_format != "table":
            data["default_format"] = self.config.default_format
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                prof_dict = profile.model_dump(exclude={"name"}, exclude_none=True)
                if prof_dict.get("verify_ssl") is True:
                    del prof_dict["verify_ssl"]
                if prof_dict.get("timeout") == DEFAULT_TIMEOUT:
                    del prof_dict["timeout"]
                if prof_dict.get("endpoint") == DEFAULT_ENDPOINT:
                    del prof_dict["endpoint"]
                data["profiles"][name] = prof_dict
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.rename(self.config_path)

    def add_profile(self, profile: ArmProfile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> ArmProfile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        endpoint: str | None = None,
        token: str | None = None,
        subscription_id: str | None = None,
    ) -> ArmProfile:
        """Resolve the connection settings for a command.

        Precedence: CLI flags > env vars > config profile > defaults.
        """
        requested = profile_name or os.environ.get(ENV_PROFILE)
        profile = self.get_profile(requested)
        if requested and profile is None:
            raise ConfigurationError(f"Profile '{requested}' not found.")

        resolved_endpoint = (
            endpoint
            or os.environ.get(ENV_ENDPOINT)
            or (profile.endpoint if profile else DEFAULT_ENDPOINT)
        )
        resolved_token = (
            token or os.environ.get(ENV_TOKEN) or (profile.token if profile else None)
        )
        resolved_subscription = (
            subscription_id
            or os.environ.get(ENV_SUBSCRIPTION_ID)
            or (profile.subscription_id if profile else None)
        )

        return ArmProfile(
            name=profile.name if profile else "cli",
            endpoint=resolved_endpoint,
            token=resolved_token,
            subscription_id=resolved_subscription,
            scopes=profile.scopes if profile else None,
            verify_ssl=profile.verify_ssl if profile else True,
            timeout=profile.timeout if profile else DEFAULT_TIMEOUT,
        )
