"""Users endpoints.

Every method takes a user id first; passing an empty string addresses the
authenticated user (``/me``).

Vimeo API docs: https://developer.vimeo.com/api/reference/users
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from vimeo_client.client.options import CallOption
from vimeo_client.client.upload import upload_video, upload_video_by_url
from vimeo_client.models.category import Category
from vimeo_client.models.channel import Channel, Group
from vimeo_client.models.collection import Album, AlbumRequest, Feed, Portfolio
from vimeo_client.models.user import User, UserRequest
from vimeo_client.models.video import Preset, Video
from vimeo_client.services.base import Service, user_path

if TYPE_CHECKING:
    from vimeo_client.client.vimeo import Response


class UsersService(Service):
    def search(self, *opts: CallOption) -> tuple[list[User], Response]:
        """Search for users; pass a Query option."""
        return self._list("users", User, *opts)

    def get(self, uid: str, *opts: CallOption) -> tuple[User, Response]:
        return self._get(user_path(uid), User, *opts)

    def edit(self, uid: str, r: UserRequest) -> tuple[User, Response]:
        return self._send("PATCH", user_path(uid), User, r)

    def list_appearance(self, uid: str, *opts: CallOption) -> tuple[list[Video], Response]:
        """List the videos a user appears in."""
        return self._list(user_path(uid, "appearances"), Video, *opts)

    def list_category(self, uid: str, *opts: CallOption) -> tuple[list[Category], Response]:
        return self._list(user_path(uid, "categories"), Category, *opts)

    def subscribe_category(self, uid: str, cat: str) -> Response:
        return self._call("PUT", user_path(uid, f"categories/{cat}"))

    def unsubscribe_category(self, uid: str, cat: str) -> Response:
        return self._call("DELETE", user_path(uid, f"categories/{cat}"))

    def list_channel(self, uid: str, *opts: CallOption) -> tuple[list[Channel], Response]:
        return self._list(user_path(uid, "channels"), Channel, *opts)

    def subscribe_channel(self, uid: str, ch: str) -> Response:
        return self._call("PUT", user_path(uid, f"channels/{ch}"))

    def unsubscribe_channel(self, uid: str, ch: str) -> Response:
        return self._call("DELETE", user_path(uid, f"channels/{ch}"))

    def feed(self, uid: str, *opts: CallOption) -> tuple[list[Feed], Response]:
        return self._list(user_path(uid, "feed"), Feed, *opts)

    def list_follower(self, uid: str, *opts: CallOption) -> tuple[list[User], Response]:
        return self._list(user_path(uid, "followers"), User, *opts)

    def list_followed(self, uid: str, *opts: CallOption) -> tuple[list[User], Response]:
        return self._list(user_path(uid, "following"), User, *opts)

    def follow_user(self, uid: str, fid: str) -> Response:
        return self._call("PUT", user_path(uid, f"following/{fid}"))

    def unfollow_user(self, uid: str, fid: str) -> Response:
        return self._call("DELETE", user_path(uid, f"following/{fid}"))

    def list_group(self, uid: str, *opts: CallOption) -> tuple[list[Group], Response]:
        return self._list(user_path(uid, "groups"), Group, *opts)

    def join_group(self, uid: str, gid: str) -> Response:
        return self._call("PUT", user_path(uid, f"groups/{gid}"))

    def leave_group(self, uid: str, gid: str) -> Response:
        return self._call("DELETE", user_path(uid, f"groups/{gid}"))

    def list_liked_video(self, uid: str, *opts: CallOption) -> tuple[list[Video], Response]:
        return self._list(user_path(uid, "likes"), Video, *opts)

    def like_video(self, uid: str, vid: int) -> Response:
        return self._call("PUT", user_path(uid, f"likes/{vid}"))

    def unlike_video(self, uid: str, vid: int) -> Response:
        return self._call("DELETE", user_path(uid, f"likes/{vid}"))

    def remove_portrait(self, uid: str, pid: str) -> Response:
        return self._call("DELETE", user_path(uid, f"pictures/{pid}"))

    def list_video(self, uid: str, *opts: CallOption) -> tuple[list[Video], Response]:
        return self._list(user_path(uid, "videos"), Video, *opts)

    def get_video(self, uid: str, vid: int, *opts: CallOption) -> tuple[Video, Response]:
        return self._get(user_path(uid, f"videos/{vid}"), Video, *opts)

    def upload_video(self, uid: str, file_path: Path) -> tuple[Video, Response]:
        """Upload a local file as a new video."""
        return upload_video(self.client, "POST", user_path(uid, "videos"), file_path)

    def upload_video_by_url(self, uid: str, video_url: str) -> tuple[Video, Response]:
        """Ask Vimeo to pull a new video from a public URL."""
        return upload_video_by_url(self.client, user_path(uid, "videos"), video_url)

    # Watch later

    def watch_later_list_video(self, uid: str, *opts: CallOption) -> tuple[list[Video], Response]:
        return self._list(user_path(uid, "watchlater"), Video, *opts)

    def watch_later_get_video(self, uid: str, vid: int) -> tuple[Video, Response]:
        return self._get(user_path(uid, f"watchlater/{vid}"), Video)

    def watch_later_add_video(self, uid: str, vid: int) -> Response:
        return self._call("PUT", user_path(uid, f"watchlater/{vid}"))

    def watch_later_delete_video(self, uid: str, vid: int) -> Response:
        return self._call("DELETE", user_path(uid, f"watchlater/{vid}"))

    # Watch history (only for the authenticated user)

    def watched_list_video(self, *opts: CallOption) -> tuple[list[Video], Response]:
        return self._list("me/watched/videos", Video, *opts)

    def clear_watched_list(self) -> Response:
        return self._call("DELETE", "me/watched/videos")

    def watched_delete_video(self, vid: int) -> Response:
        return self._call("DELETE", f"me/watched/videos/{vid}")

    # Albums

    def list_album(self, uid: str, *opts: CallOption) -> tuple[list[Album], Response]:
        return self._list(user_path(uid, "albums"), Album, *opts)

    def create_album(self, uid: str, r: AlbumRequest) -> tuple[Album, Response]:
        return self._send("POST", user_path(uid, "albums"), Album, r)

    def get_album(self, uid: str, ab: str, *opts: CallOption) -> tuple[Album, Response]:
        return self._get(user_path(uid, f"albums/{ab}"), Album, *opts)

    def edit_album(self, uid: str, ab: str, r: AlbumRequest) -> tuple[Album, Response]:
        return self._send("PATCH", user_path(uid, f"albums/{ab}"), Album, r)

    def delete_album(self, uid: str, ab: str) -> Response:
        return self._call("DELETE", user_path(uid, f"albums/{ab}"))

    def album_list_video(self, uid: str, ab: str, *opts: CallOption) -> tuple[list[Video], Response]:
        return self._list(user_path(uid, f"albums/{ab}/videos"), Video, *opts)

    def album_get_video(
        self, uid: str, ab: str, vid: int, *opts: CallOption,
    ) -> tuple[Video, Response]:
        return self._get(user_path(uid, f"albums/{ab}/videos/{vid}"), Video, *opts)

    def album_add_video(self, uid: str, ab: str, vid: int) -> Response:
        return self._call("PUT", user_path(uid, f"albums/{ab}/videos/{vid}"))

    def album_delete_video(self, uid: str, ab: str, vid: int) -> Response:
        return self._call("DELETE", user_path(uid, f"albums/{ab}/videos/{vid}"))

    # Portfolios

    def list_portfolio(self, uid: str, *opts: CallOption) -> tuple[list[Portfolio], Response]:
        return self._list(user_path(uid, "portfolios"), Portfolio, *opts)

    def get_portfolio(self, uid: str, p: str, *opts: CallOption) -> tuple[Portfolio, Response]:
        return self._get(user_path(uid, f"portfolios/{p}"), Portfolio, *opts)

    def portfolio_list_video(
        self, uid: str, p: str, *opts: CallOption,
    ) -> tuple[list[Video], Response]:
        return self._list(user_path(uid, f"portfolios/{p}/videos"), Video, *opts)

    def portfolio_get_video(
        self, uid: str, p: str, vid: int, *opts: CallOption,
    ) -> tuple[Video, Response]:
        return self._get(user_path(uid, f"portfolios/{p}/videos/{vid}"), Video, *opts)

    def portfolio_add_video(self, uid: str, p: str, vid: int) -> Response:
        return self._call("PUT", user_path(uid, f"portfolios/{p}/videos/{vid}"))

    def portfolio_delete_video(self, uid: str, p: str, vid: int) -> Response:
        return self._call("DELETE", user_path(uid, f"portfolios/{p}/videos/{vid}"))

    # Embed presets

    def list_preset(self, uid: str, *opts: CallOption) -> tuple[list[Preset], Response]:
        return self._list(user_path(uid, "presets"), Preset, *opts)

    def get_preset(self, uid: str, preset: int, *opts: CallOption) -> tuple[Preset, Response]:
        return self._get(user_path(uid, f"presets/{preset}"), Preset, *opts)

    def preset_list_video(
        self, uid: str, preset: int, *opts: CallOption,
    ) -> tuple[list[Video], Response]:
        return self._list(user_path(uid, f"presets/{preset}/videos"), Video, *opts)
