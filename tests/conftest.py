"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from vimeo_client.client.vimeo import Client, ClientConfig
from vimeo_client.config.manager import ConfigManager
from vimeo_client.config.models import Profile

BASE = "https://api.vimeo.test/"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config file at a temp dir and clear VIMEO_* env vars."""
    path = tmp_path / "cfg" / "config.toml"
    monkeypatch.setattr("vimeo_client.config.manager.CONFIG_FILE", path)
    for var in ("VIMEO_TOKEN", "VIMEO_PROFILE", "VIMEO_BASE_URL"):
        monkeypatch.delenv(var, raising=False)
    return path


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> Profile:
    return Profile(name="test", token="tok123456789", base_url=BASE)


@pytest.fixture
def client() -> Client:
    """A Client against a fake base URL; mock it with respx."""
    with httpx.Client() as http:
        yield Client(http, ClientConfig(base_url=BASE, user_agent="test-agent/1.0"))


@pytest.fixture
def video_payload() -> dict:
    return {
        "uri": "/videos/12345",
        "name": "Sample Video",
        "link": "https://vimeo.com/12345",
        "duration": 62,
        "status": "available",
    }
