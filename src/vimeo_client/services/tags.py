"""Tags endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vimeo_client.client.options import CallOption
from vimeo_client.models.metadata import Tag
from vimeo_client.models.video import Video
from vimeo_client.services.base import Service

if TYPE_CHECKING:
    from vimeo_client.client.vimeo import Response


class TagsService(Service):
    def get(self, word: str) -> tuple[Tag, Response]:
        return self._get(f"tags/{word}", Tag)

    def list_video(self, word: str, *opts: CallOption) -> tuple[list[Video], Response]:
        return self._list(f"tags/{word}/videos", Video, *opts)
