"""Tests for config manager."""

import os
import stat

import pytest

from armkit.client.errors import ConfigurationError
from armkit.config.manager import ConfigManager
from armkit.config.models import ArmProfile


class TestConfigManager:
    def test_load_empty(self, config_manager: ConfigManager):
        assert config_manager.config.profiles == {}
        assert config_manager.config.default_profile is None

    def test_add_profile(self, config_manager: ConfigManager, sample_profile: ArmProfile):
        config_manager.add_profile(sample_profile)
        assert "test-arm" in config_manager.config.profiles
        assert config_manager.config.default_profile == "test-arm"

    def test_add_sets_first_as_default(self, config_manager: ConfigManager):
        config_manager.add_profile(ArmProfile(name="first"))
        config_manager.add_profile(ArmProfile(name="second"))
        assert config_manager.config.default_profile == "first"

    def test_remove_profile(self, config_manager: ConfigManager, sample_profile: ArmProfile):
        config_manager.add_profile(sample_profile)
        assert config_manager.remove_profile("test-arm") is True
        assert "test-arm" not in config_manager.config.profiles

    def test_remove_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.remove_profile("nope") is False

    def test_remove_default_reassigns(self, config_manager: ConfigManager):
        config_manager.add_profile(ArmProfile(name="a"))
        config_manager.add_profile(ArmProfile(name="b"))
        config_manager.remove_profile("a")
        assert config_manager.config.default_profile == "b"

    def test_set_default(self, config_manager: ConfigManager):
        config_manager.add_profile(ArmProfile(name="a"))
        config_manager.add_profile(ArmProfile(name="dev"))
        assert config_manager.set_default("dev") is True
        assert config_manager.config.default_profile == "dev"

    def test_set_default_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.set_default("nope") is False

    def test_get_default_profile(self, config_manager: ConfigManager, sample_profile: ArmProfile):
        config_manager.add_profile(sample_profile)
        p = config_manager.get_profile()
        assert p is not None
        assert p.name == "test-arm"

    def test_save_and_reload(self, config_manager: ConfigManager, sample_profile: ArmProfile):
        config_manager.add_profile(sample_profile)
        mgr2 = ConfigManager(config_path=config_manager.config_path)
        p = mgr2.get_profile("test-arm")
        assert p is not None
        assert p.endpoint == "https://management.azure.com"
        assert p.subscription_id == sample_profile.subscription_id
        assert p.token == "test-token-value"

    def test_defaults_not_written(self, config_manager: ConfigManager):
        config_manager.add_profile(ArmProfile(name="plain", subscription_id="s"))
        text = config_manager.config_path.read_text()
        assert "endpoint" not in text
        assert "timeout" not in text
        assert "verify_ssl" not in text

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_file_is_owner_only(self, config_manager: ConfigManager, sample_profile: ArmProfile):
        config_manager.add_profile(sample_profile)
        mode = stat.S_IMODE(config_manager.config_path.stat().st_mode)
        assert mode == 0o600

    def test_invalid_toml(self, tmp_config):
        tmp_config.write_text("profiles = [not toml")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            ConfigManager(config_path=tmp_config).config


class TestResolveProfile:
    def test_from_profile(self, config_manager: ConfigManager, sample_profile: ArmProfile):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_profile()
        assert resolved.name == "test-arm"
        assert resolved.token == "test-token-value"
        assert resolved.subscription_id == sample_profile.subscription_id

    def test_cli_overrides(self, config_manager: ConfigManager, sample_profile: ArmProfile):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_profile(
            endpoint="https://management.usgovcloudapi.net",
            token="cli-token",
            subscription_id="cli-sub",
        )
        assert resolved.endpoint == "https://management.usgovcloudapi.net"
        assert resolved.token == "cli-token"
        assert resolved.subscription_id == "cli-sub"

    def test_env_over_profile(
        self,
        config_manager: ConfigManager,
        sample_profile: ArmProfile,
        monkeypatch: pytest.MonkeyPatch,
    ):
        config_manager.add_profile(sample_profile)
        monkeypatch.setenv("ARMKIT_TOKEN", "env-token")
        monkeypatch.setenv("ARMKIT_SUBSCRIPTION_ID", "env-sub")
        resolved = config_manager.resolve_profile()
        assert resolved.token == "env-token"
        assert resolved.subscription_id == "env-sub"

    def test_cli_over_env(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ARMKIT_ENDPOINT", "https://env.example")
        resolved = config_manager.resolve_profile(endpoint="https://cli.example")
        assert resolved.endpoint == "https://cli.example"

    def test_profile_from_env(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        config_manager.add_profile(ArmProfile(name="a", subscription_id="sa"))
        config_manager.add_profile(ArmProfile(name="b", subscription_id="sb"))
        monkeypatch.setenv("ARMKIT_PROFILE", "b")
        assert config_manager.resolve_profile().subscription_id == "sb"

    def test_defaults_without_profile(self, config_manager: ConfigManager):
        resolved = config_manager.resolve_profile()
        assert resolved.endpoint == "https://management.azure.com"
        assert resolved.token is None
        assert resolved.verify_ssl is True

    def test_unknown_profile_raises(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="'ghost' not found"):
            config_manager.resolve_profile(profile_name="ghost")
