"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from vimeo_client.config.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)


class Profile(BaseModel):
    """A named API connection profile."""

    name: str
    token: str | None = Field(default=None, description="OAuth2 access token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root URL")
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent header; empty to omit",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        # Relative paths resolve beneath the base only with a trailing slash
        return v.rstrip("/") + "/"

    @property
    def auth_configured(self) -> bool:
        return bool(self.token)


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, Profile] = Field(default_factory=dict)
