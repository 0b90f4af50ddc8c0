"""Channels endpoints.

Vimeo API docs: https://developer.vimeo.com/api/reference/channels
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vimeo_client.client.options import CallOption
from vimeo_client.models.channel import Channel, ChannelRequest
from vimeo_client.models.user import User
from vimeo_client.models.video import Video
from vimeo_client.services.base import Service

if TYPE_CHECKING:
    from vimeo_client.client.vimeo import Response


class ChannelsService(Service):
    def list(self, *opts: CallOption) -> tuple[list[Channel], Response]:
        return self._list("channels", Channel, *opts)

    def create(self, r: ChannelRequest) -> tuple[Channel, Response]:
        return self._send("POST", "channels", Channel, r)

    def get(self, ch: str, *opts: CallOption) -> tuple[Channel, Response]:
        return self._get(f"channels/{ch}", Channel, *opts)

    def edit(self, ch: str, r: ChannelRequest) -> tuple[Channel, Response]:
        return self._send("PATCH", f"channels/{ch}", Channel, r)

    def delete(self, ch: str) -> Response:
        return self._call("DELETE", f"channels/{ch}")

    def list_user(self, ch: str, *opts: CallOption) -> tuple[list[User], Response]:
        """List the followers of a channel."""
        return self._list(f"channels/{ch}/users", User, *opts)

    def list_video(self, ch: str, *opts: CallOption) -> tuple[list[Video], Response]:
        return self._list(f"channels/{ch}/videos", Video, *opts)

    def get_video(self, ch: str, vid: int, *opts: CallOption) -> tuple[Video, Response]:
        return self._get(f"channels/{ch}/videos/{vid}", Video, *opts)

    def add_video(self, ch: str, vid: int) -> Response:
        return self._call("PUT", f"channels/{ch}/videos/{vid}")

    def delete_video(self, ch: str, vid: int) -> Response:
        return self._call("DELETE", f"channels/{ch}/videos/{vid}")
