"""Integration tests for config commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from armkit.app import app

runner = CliRunner()
ENDPOINT = "https://management.usgovcloudapi.net"


class TestConfigCommands:
    def test_list_empty(self):
        result = runner.invoke(app, ["config", "list"])
        assert result.exit_code == 0
        assert "No profiles configured" in result.output

    def test_add_and_list(self, isolated_config):
        result = runner.invoke(app, ["config", "add", "gov", "--endpoint", ENDPOINT, "-s", "sub-1"])
        assert result.exit_code == 0
        assert "added" in result.output
        assert isolated_config.get_profile().endpoint == ENDPOINT

        result = runner.invoke(app, ["config", "list"])
        assert result.exit_code == 0
        assert "gov" in result.output

    def test_add_rejects_bad_endpoint(self):
        result = runner.invoke(app, ["config", "add", "bad", "--endpoint", "management.azure.com"])
        assert result.exit_code == 1

    def test_add_with_scopes(self, isolated_config):
        result = runner.invoke(app, [
            "config", "add", "custom", "--scope", "api://a/.default", "--scope", "api://b/.default",
        ])
        assert result.exit_code == 0
        assert isolated_config.get_profile("custom").scopes == [
            "api://a/.default", "api://b/.default",
        ]

    def test_show_masks_token(self):
        runner.invoke(app, ["config", "add", "dev", "--token", "eyJ0eXAiOiJKV1QiLCJhbGc"])
        result = runner.invoke(app, ["config", "show", "dev", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["token"] == "eyJ0eXAi..."

    def test_show_nonexistent(self):
        result = runner.invoke(app, ["config", "show", "nope"])
        assert result.exit_code == 1

    def test_set_default(self, isolated_config):
        runner.invoke(app, ["config", "add", "a"])
        runner.invoke(app, ["config", "add", "b"])
        result = runner.invoke(app, ["config", "set-default", "b"])
        assert result.exit_code == 0
        assert isolated_config.config.default_profile == "b"

    def test_remove_profile(self):
        runner.invoke(app, ["config", "add", "dev"])
        result = runner.invoke(app, ["config", "remove", "dev", "--force"])
        assert result.exit_code == 0
        assert "removed" in result.output

    def test_remove_nonexistent(self):
        result = runner.invoke(app, ["config", "remove", "nope", "--force"])
        assert result.exit_code == 1

    def test_list_json_format(self):
        runner.invoke(app, ["config", "add", "dev", "--token", "short"])
        result = runner.invoke(app, ["config", "list", "--format", "json"])
        assert result.exit_code == 0
        profiles = json.loads(result.output)
        assert profiles[0]["name"] == "dev"
        assert profiles[0]["token"] == "***"

    def test_token_check_with_static_token(self):
        runner.invoke(app, ["config", "add", "dev", "--token", "abc"])
        result = runner.invoke(app, ["config", "test", "dev"])
        assert result.exit_code == 0
        assert "https://management.azure.com/.default" in result.output
        assert "Token acquired" in result.output

    def test_token_check_unknown_profile(self):
        result = runner.invoke(app, ["config", "test", "nope"])
        assert result.exit_code == 9
