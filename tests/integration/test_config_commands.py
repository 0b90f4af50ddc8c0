"""Integration tests for config commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from vimeo_client.app import app
from vimeo_client.config.manager import ConfigManager

runner = CliRunner()


class TestConfigCommands:
    def test_list_empty(self):
        result = runner.invoke(app, ["config", "list"])
        assert result.exit_code == 0
        assert "No profiles configured" in result.output

    def test_add_and_list(self):
        result = runner.invoke(app, ["config", "add", "dev", "--token", "abc123"])
        assert result.exit_code == 0
        assert "added" in result.output

        result = runner.invoke(app, ["config", "list"])
        assert result.exit_code == 0
        assert "dev" in result.output

    def test_add_persists(self):
        runner.invoke(app, ["config", "add", "dev", "--token", "abc123", "--timeout", "5"])
        profile = ConfigManager().get_profile("dev")
        assert profile is not None
        assert profile.timeout == 5.0

    def test_add_bad_url(self):
        result = runner.invoke(app, ["config", "add", "dev", "--token", "t", "--base-url", "api.vimeo.com"])
        assert result.exit_code != 0

    def test_show_masks_token(self):
        runner.invoke(app, ["config", "add", "dev", "--token", "verylongsecrettoken"])
        result = runner.invoke(app, ["config", "show", "dev"])
        assert result.exit_code == 0
        assert "dev" in result.output
        assert "verylongsecrettoken" not in result.output

    def test_show_nonexistent(self):
        result = runner.invoke(app, ["config", "show", "nope"])
        assert result.exit_code == 1

    def test_use(self):
        runner.invoke(app, ["config", "add", "a", "--token", "1"])
        runner.invoke(app, ["config", "add", "b", "--token", "2"])
        result = runner.invoke(app, ["config", "use", "b"])
        assert result.exit_code == 0
        assert ConfigManager().config.default_profile == "b"

    def test_use_nonexistent(self):
        result = runner.invoke(app, ["config", "use", "nope"])
        assert result.exit_code == 1

    def test_remove(self):
        runner.invoke(app, ["config", "add", "dev", "--token", "1"])
        result = runner.invoke(app, ["config", "remove", "dev", "--force"])
        assert result.exit_code == 0
        assert "removed" in result.output

    def test_remove_cancelled(self):
        runner.invoke(app, ["config", "add", "dev", "--token", "1"])
        result = runner.invoke(app, ["config", "remove", "dev"], input="n\n")
        assert "Cancelled" in result.output
        assert ConfigManager().get_profile("dev") is not None

    def test_list_json_hides_token(self):
        runner.invoke(app, ["config", "add", "dev", "--token", "abc123"])
        result = runner.invoke(app, ["config", "list", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0]["name"] == "dev"
        assert "token" not in data[0]

    def test_init(self):
        result = runner.invoke(app, ["config", "init"], input="main\nsecret\n\n")
        assert result.exit_code == 0
        profile = ConfigManager().get_profile("main")
        assert profile is not None
        assert profile.token == "secret"
