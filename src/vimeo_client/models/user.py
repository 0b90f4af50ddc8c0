"""User-related data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from vimeo_client.models.common import Pictures, id_from_uri


class WebSite(BaseModel):
    name: str | None = None
    link: str | None = None
    description: str | None = None


class User(BaseModel):
    """A Vimeo user."""

    uri: str | None = None
    name: str | None = None
    link: str | None = None
    location: str | None = None
    bio: str | None = None
    created_time: datetime | None = None
    account: str | None = None
    pictures: Pictures | None = None
    websites: list[WebSite] = Field(default_factory=list)
    content_filter: list[str] = Field(default_factory=list)
    resource_key: str | None = None

    @property
    def id(self) -> str:
        return id_from_uri(self.uri)


class UserRequest(BaseModel):
    """Body of a request to edit a user."""

    name: str | None = None
    location: str | None = None
    bio: str | None = None
