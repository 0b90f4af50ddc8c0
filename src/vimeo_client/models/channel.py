"""Channel and group data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from vimeo_client.models.common import Header, Pictures, Privacy, id_from_uri
from vimeo_client.models.user import User


class Channel(BaseModel):
    """A channel."""

    uri: str | None = None
    name: str | None = None
    description: str | None = None
    link: str | None = None
    created_time: datetime | None = None
    modified_time: datetime | None = None
    user: User | None = None
    pictures: Pictures | None = None
    header: Header | None = None
    privacy: Privacy | None = None
    resource_key: str | None = None

    @property
    def id(self) -> str:
        return id_from_uri(self.uri)


class ChannelRequest(BaseModel):
    """Body of a request to create or edit a channel."""

    name: str | None = None
    description: str | None = None
    privacy: str | None = None


class Group(BaseModel):
    """A group."""

    uri: str | None = None
    name: str | None = None
    description: str | None = None
    link: str | None = None
    created_time: datetime | None = None
    modified_time: datetime | None = None
    privacy: Privacy | None = None
    pictures: Pictures | None = None
    header: Header | None = None
    user: User | None = None
    resource_key: str | None = None

    @property
    def id(self) -> str:
        return id_from_uri(self.uri)


class GroupRequest(BaseModel):
    """Body of a request to create a group."""

    name: str | None = None
    description: str | None = None
