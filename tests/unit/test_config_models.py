"""Tests for config models."""

import pytest
from pydantic import ValidationError

from vimeo_client.config.constants import DEFAULT_USER_AGENT
from vimeo_client.config.models import CLIConfig, Profile


class TestProfile:
    def test_defaults(self):
        p = Profile(name="x")
        assert p.base_url == "https://api.vimeo.com/"
        assert p.user_agent == DEFAULT_USER_AGENT
        assert p.timeout == 30.0
        assert p.auth_configured is False

    def test_trailing_slash_added(self):
        assert Profile(name="x", base_url="https://api.vimeo.test/v3").base_url == "https://api.vimeo.test/v3/"

    def test_bad_scheme(self):
        with pytest.raises(ValidationError, match="http:// or https://"):
            Profile(name="x", base_url="ftp://api.vimeo.com")

    @pytest.mark.parametrize("timeout", [0, -1, 601])
    def test_timeout_bounds(self, timeout):
        with pytest.raises(ValidationError):
            Profile(name="x", timeout=timeout)


class TestCLIConfig:
    def test_empty(self):
        cfg = CLIConfig()
        assert cfg.default_profile is None
        assert cfg.default_format == "table"
        assert cfg.profiles == {}
