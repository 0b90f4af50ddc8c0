"""Common response models: list envelope, pagination block, shared objects."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

T = TypeVar("T")


class ErrorEnvelope(BaseModel):
    """Error body returned by the API: ``{"error": "..."}``."""

    error: str = ""


class Paging(BaseModel):
    """Relative links to neighbouring pages of a list response."""

    next: str = ""
    previous: str = ""
    first: str = ""
    last: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class Pagination(BaseModel):
    """Pagination block embedded in every list envelope.

    Format: ``{"total": N, "page": N, "paging": {"next", "previous", "first", "last"}}``.
    All fields are optional; single-item responses carry none of them.
    """

    total: int = 0
    page: int = 0
    paging: Paging = Field(default_factory=Paging)

    @field_validator("total", "page", mode="before")
    @classmethod
    def null_as_zero(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("paging", mode="before")
    @classmethod
    def null_as_blank(cls, v: Any) -> Any:
        return {} if v is None else v

    def get_page(self) -> int:
        return self.page

    def get_total(self) -> int:
        return self.total

    def get_paging(self) -> tuple[str, str, str, str]:
        """Return the next, previous, first and last page links."""
        p = self.paging
        return p.next, p.previous, p.first, p.last


class DataList(Pagination, Generic[T]):
    """List envelope: ``{"data": [...]}`` plus the pagination block."""

    data: list[T] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def null_as_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v


class PictureSize(BaseModel):
    width: int | None = None
    height: int | None = None
    link: str | None = None
    link_with_play_button: str | None = None


class Pictures(BaseModel):
    """A set of thumbnails (also used for portraits and headers)."""

    uri: str | None = None
    active: bool = False
    type: str | None = None
    sizes: list[PictureSize] = Field(default_factory=list)
    resource_key: str | None = None


class Header(Pictures):
    """Header image of a channel or group."""


class Privacy(BaseModel):
    view: str | None = None
    join: str | None = None
    videos: str | None = None
    comment: str | None = None
    forums: str | None = None
    invite: str | None = None
    embed: str | None = None
    download: bool | None = None
    add: bool | None = None


def id_from_uri(uri: str | None) -> str:
    """Return the last path segment of a resource URI."""
    if not uri:
        return ""
    return uri.rstrip("/").rsplit("/", 1)[-1]
