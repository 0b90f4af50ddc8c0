"""Categories endpoints.

Vimeo API docs: https://developer.vimeo.com/api/reference/categories
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vimeo_client.client.options import CallOption
from vimeo_client.models.category import Category
from vimeo_client.models.channel import Channel, Group
from vimeo_client.models.video import Video
from vimeo_client.services.base import Service

if TYPE_CHECKING:
    from vimeo_client.client.vimeo import Response


class CategoriesService(Service):
    def list(self, *opts: CallOption) -> tuple[list[Category], Response]:
        """List all categories."""
        return self._list("categories", Category, *opts)

    def get(self, cat: str, *opts: CallOption) -> tuple[Category, Response]:
        """Get a category by name."""
        return self._get(f"categories/{cat}", Category, *opts)

    def list_channel(self, cat: str, *opts: CallOption) -> tuple[list[Channel], Response]:
        return self._list(f"categories/{cat}/channels", Channel, *opts)

    def list_group(self, cat: str, *opts: CallOption) -> tuple[list[Group], Response]:
        return self._list(f"categories/{cat}/groups", Group, *opts)

    def list_video(self, cat: str, *opts: CallOption) -> tuple[list[Video], Response]:
        return self._list(f"categories/{cat}/videos", Video, *opts)

    def get_video(self, cat: str, vid: int, *opts: CallOption) -> tuple[Video, Response]:
        return self._get(f"categories/{cat}/videos/{vid}", Video, *opts)
