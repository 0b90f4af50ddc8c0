"""Reference data: tags, languages, content ratings, Creative Commons licenses."""

from __future__ import annotations

from pydantic import BaseModel


class Tag(BaseModel):
    uri: str | None = None
    name: str | None = None
    tag: str | None = None
    canonical: str | None = None
    resource_key: str | None = None


class Language(BaseModel):
    code: str | None = None
    name: str | None = None


class ContentRating(BaseModel):
    code: str | None = None
    name: str | None = None


class CreativeCommon(BaseModel):
    code: str | None = None
    name: str | None = None
