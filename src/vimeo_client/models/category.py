"""Category data models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from vimeo_client.models.common import Pictures


class SubCategory(BaseModel):
    uri: str | None = None
    name: str | None = None
    link: str | None = None


class Category(BaseModel):
    """A video category."""

    uri: str | None = None
    link: str | None = None
    name: str | None = None
    top_level: bool = False
    pictures: Pictures | None = None
    last_video_featured_time: str | None = None
    parent: SubCategory | None = None
    subcategories: list[SubCategory] = Field(default_factory=list)
    resource_key: str | None = None
