"""Reference-data endpoints: languages, content ratings, Creative Commons."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vimeo_client.client.options import CallOption
from vimeo_client.models.metadata import ContentRating, CreativeCommon, Language
from vimeo_client.services.base import Service

if TYPE_CHECKING:
    from vimeo_client.client.vimeo import Response


class LanguagesService(Service):
    def list(self, *opts: CallOption) -> tuple[list[Language], Response]:
        return self._list("languages", Language, *opts)


class ContentRatingsService(Service):
    def list(self, *opts: CallOption) -> tuple[list[ContentRating], Response]:
        return self._list("contentratings", ContentRating, *opts)


class CreativeCommonsService(Service):
    def list(self, *opts: CallOption) -> tuple[list[CreativeCommon], Response]:
        return self._list("creativecommons", CreativeCommon, *opts)
