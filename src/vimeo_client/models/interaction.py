"""Comments, credits, thumbnails and text tracks attached to a video."""

from __future__ import annotations

from pydantic import BaseModel

from vimeo_client.models.user import User
from vimeo_client.models.video import Video


class Comment(BaseModel):
    uri: str | None = None
    type: str | None = None
    text: str | None = None
    created_on: str | None = None
    user: User | None = None
    resource_key: str | None = None


class CommentRequest(BaseModel):
    text: str | None = None


class Credit(BaseModel):
    uri: str | None = None
    name: str | None = None
    role: str | None = None
    user: User | None = None
    video: Video | None = None


class CreditRequest(BaseModel):
    role: str | None = None
    name: str | None = None
    email: str | None = None
    user_uri: str | None = None


class PicturesRequest(BaseModel):
    """Body of a request to create or edit a thumbnail."""

    time: float | None = None
    active: bool | None = None


class TextTrack(BaseModel):
    uri: str | None = None
    name: str | None = None
    type: str | None = None
    language: str | None = None
    active: bool | None = None
    link: str | None = None


class TextTrackRequest(BaseModel):
    active: bool | None = None
    type: str | None = None
    language: str | None = None
    name: str | None = None
