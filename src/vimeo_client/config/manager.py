"""Configuration manager: read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from vimeo_client.client.errors import ConfigurationError
from vimeo_client.config.constants import (
    CONFIG_FILE,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ENV_BASE_URL,
    ENV_PROFILE,
    ENV_TOKEN,
)
from vimeo_client.config.models import CLIConfig, Profile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk and resolves API profiles."""

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
        data = tomllib.loads(self.config_path.read_bytes().decode())
        profiles: dict[str, Profile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = Profile(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Tokens live in this file: owner-only directory and file
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
                if prof_dict.get("base_url") == DEFAULT_BASE_URL:
                    del prof_dict["base_url"]
                if prof_dict.get("user_agent") == DEFAULT_USER_AGENT:
                    del prof_dict["user_agent"]
                if prof_dict.get("timeout") == DEFAULT_TIMEOUT:
                    del prof_dict["timeout"]
                data["profiles"][name] = prof_dict
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def add_profile(self, profile: Profile) -> None:
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

    def get_profile(self, name: str | None = None) -> Profile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        token: str | None = None,
        base_url: str | None = None,
    ) -> Profile:
        """Resolve the connection to use.

        Precedence: CLI flags > env vars > config profile.
        """
        env_profile = os.environ.get(ENV_PROFILE)
        profile = self.get_profile(profile_name or env_profile)
        if (profile_name or env_profile) and profile is None:
            raise ConfigurationError(f"Profile '{profile_name or env_profile}' not found.")

        resolved_token = token or os.environ.get(ENV_TOKEN) or (profile.token if profile else None)
        resolved_url = (
            base_url
            or os.environ.get(ENV_BASE_URL)
            or (profile.base_url if profile else DEFAULT_BASE_URL)
        )

        if not resolved_token:
            raise ConfigurationError(
                "No access token configured. Use 'vimeo-client config add' or set "
                f"{ENV_TOKEN} or pass --token."
            )

        return Profile(
            name=profile.name if profile else "cli",
            token=resolved_token,
            base_url=resolved_url,
            user_agent=profile.user_agent if profile else DEFAULT_USER_AGENT,
            timeout=profile.timeout if profile else DEFAULT_TIMEOUT,
        )
