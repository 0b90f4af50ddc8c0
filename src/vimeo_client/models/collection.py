"""Albums, portfolios and feed items owned by a user."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from vimeo_client.models.common import Pictures, Privacy, id_from_uri
from vimeo_client.models.user import User
from vimeo_client.models.video import Video


class Album(BaseModel):
    uri: str | None = None
    name: str | None = None
    description: str | None = None
    link: str | None = None
    duration: int | None = None
    created_time: datetime | None = None
    modified_time: datetime | None = None
    user: User | None = None
    pictures: Pictures | None = None
    privacy: Privacy | None = None

    @property
    def id(self) -> str:
        return id_from_uri(self.uri)


class AlbumRequest(BaseModel):
    """Body of a request to create or edit an album."""

    name: str | None = None
    description: str | None = None
    privacy: str | None = None
    password: str | None = None
    sort: str | None = None


class Portfolio(BaseModel):
    uri: str | None = None
    name: str | None = None
    description: str | None = None
    link: str | None = None
    created_time: datetime | None = None
    modified_time: datetime | None = None
    sort: str | None = None


class Feed(BaseModel):
    """An item of a user's feed."""

    uri: str | None = None
    clip: Video | None = None
