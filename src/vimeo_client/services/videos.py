"""Videos endpoints, including comments, credits, thumbnails and text tracks.

Vimeo API docs: https://developer.vimeo.com/api/reference/videos
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from vimeo_client.client.options import CallOption
from vimeo_client.client.upload import upload_video
from vimeo_client.models.category import Category
from vimeo_client.models.interaction import (
    Comment,
    CommentRequest,
    Credit,
    CreditRequest,
    PicturesRequest,
    TextTrack,
    TextTrackRequest,
)
from vimeo_client.models.common import Pictures
from vimeo_client.models.metadata import Tag
from vimeo_client.models.user import User
from vimeo_client.models.video import Domain, Preset, Video, VideoRequest
from vimeo_client.services.base import Service

if TYPE_CHECKING:
    from vimeo_client.client.vimeo import Response


class VideosService(Service):
    def list(self, *opts: CallOption) -> tuple[list[Video], Response]:
        """Search for videos; pass a Query option."""
        return self._list("videos", Video, *opts)

    def get(self, vid: int, *opts: CallOption) -> tuple[Video, Response]:
        return self._get(f"videos/{vid}", Video, *opts)

    def edit(self, vid: int, r: VideoRequest) -> tuple[Video, Response]:
        return self._send("PATCH", f"videos/{vid}", Video, r)

    def delete(self, vid: int) -> Response:
        return self._call("DELETE", f"videos/{vid}")

    def list_category(self, vid: int, *opts: CallOption) -> tuple[list[Category], Response]:
        return self._list(f"videos/{vid}/categories", Category, *opts)

    def like_list(self, vid: int, *opts: CallOption) -> tuple[list[User], Response]:
        """List the users who liked a video."""
        return self._list(f"videos/{vid}/likes", User, *opts)

    def get_preset(self, vid: int, preset: int) -> tuple[Preset, Response]:
        return self._get(f"videos/{vid}/presets/{preset}", Preset)

    def assign_preset(self, vid: int, preset: int) -> Response:
        return self._call("PUT", f"videos/{vid}/presets/{preset}")

    def unassign_preset(self, vid: int, preset: int) -> Response:
        return self._call("DELETE", f"videos/{vid}/presets/{preset}")

    def list_domain(self, vid: int, *opts: CallOption) -> tuple[list[Domain], Response]:
        """List the domains a video may be embedded on."""
        return self._list(f"videos/{vid}/privacy/domains", Domain, *opts)

    def allow_domain(self, vid: int, domain: str) -> Response:
        return self._call("PUT", f"videos/{vid}/privacy/domains/{domain}")

    def disallow_domain(self, vid: int, domain: str) -> Response:
        return self._call("DELETE", f"videos/{vid}/privacy/domains/{domain}")

    def list_user(self, vid: int, *opts: CallOption) -> tuple[list[User], Response]:
        """List the users allowed to view a private video."""
        return self._list(f"videos/{vid}/privacy/users", User, *opts)

    def allow_users(self, vid: int) -> Response:
        return self._call("PUT", f"videos/{vid}/privacy/users")

    def allow_user(self, vid: int, uid: str) -> Response:
        return self._call("PUT", f"videos/{vid}/privacy/users/{uid}")

    def disallow_user(self, vid: int, uid: str) -> Response:
        return self._call("DELETE", f"videos/{vid}/privacy/users/{uid}")

    def list_tag(self, vid: int, *opts: CallOption) -> tuple[list[Tag], Response]:
        return self._list(f"videos/{vid}/tags", Tag, *opts)

    def get_tag(self, vid: int, word: str, *opts: CallOption) -> tuple[Tag, Response]:
        return self._get(f"videos/{vid}/tags/{word}", Tag, *opts)

    def assign_tag(self, vid: int, word: str) -> Response:
        return self._call("PUT", f"videos/{vid}/tags/{word}")

    def unassign_tag(self, vid: int, word: str) -> Response:
        return self._call("DELETE", f"videos/{vid}/tags/{word}")

    def list_related_video(self, vid: int, *opts: CallOption) -> tuple[list[Video], Response]:
        return self._list(f"videos/{vid}/videos", Video, *opts)

    def replace_file(self, vid: int, file_path: Path) -> tuple[Video, Response]:
        """Upload a new source file for an existing video."""
        return upload_video(self.client, "PUT", f"videos/{vid}/files", file_path)

    # Comments

    def list_comment(self, vid: int, *opts: CallOption) -> tuple[list[Comment], Response]:
        return self._list(f"videos/{vid}/comments", Comment, *opts)

    def add_comment(self, vid: int, r: CommentRequest) -> tuple[Comment, Response]:
        return self._send("POST", f"videos/{vid}/comments", Comment, r)

    def get_comment(self, vid: int, cid: int, *opts: CallOption) -> tuple[Comment, Response]:
        return self._get(f"videos/{vid}/comments/{cid}", Comment, *opts)

    def edit_comment(self, vid: int, cid: int, r: CommentRequest) -> tuple[Comment, Response]:
        return self._send("PATCH", f"videos/{vid}/comments/{cid}", Comment, r)

    def delete_comment(self, vid: int, cid: int) -> Response:
        return self._call("DELETE", f"videos/{vid}/comments/{cid}")

    def list_replies(self, vid: int, cid: int, *opts: CallOption) -> tuple[list[Comment], Response]:
        return self._list(f"videos/{vid}/comments/{cid}/replies", Comment, *opts)

    def add_replies(self, vid: int, cid: int, r: CommentRequest) -> tuple[Comment, Response]:
        return self._send("POST", f"videos/{vid}/comments/{cid}/replies", Comment, r)

    # Credits

    def list_credit(self, vid: int, *opts: CallOption) -> tuple[list[Credit], Response]:
        return self._list(f"videos/{vid}/credits", Credit, *opts)

    def add_credit(self, vid: int, r: CreditRequest) -> tuple[Credit, Response]:
        return self._send("POST", f"videos/{vid}/credits", Credit, r)

    def get_credit(self, vid: int, cid: int, *opts: CallOption) -> tuple[Credit, Response]:
        return self._get(f"videos/{vid}/credits/{cid}", Credit, *opts)

    def edit_credit(self, vid: int, cid: int, r: CreditRequest) -> tuple[Credit, Response]:
        return self._send("PATCH", f"videos/{vid}/credits/{cid}", Credit, r)

    def delete_credit(self, vid: int, cid: int) -> Response:
        return self._call("DELETE", f"videos/{vid}/credits/{cid}")

    # Thumbnails

    def list_pictures(self, vid: int, *opts: CallOption) -> tuple[list[Pictures], Response]:
        return self._list(f"videos/{vid}/pictures", Pictures, *opts)

    def create_pictures(self, vid: int, r: PicturesRequest) -> tuple[Pictures, Response]:
        return self._send("POST", f"videos/{vid}/pictures", Pictures, r)

    def get_pictures(self, vid: int, pid: int) -> tuple[Pictures, Response]:
        return self._get(f"videos/{vid}/pictures/{pid}", Pictures)

    def edit_pictures(self, vid: int, pid: int, r: PicturesRequest) -> tuple[Pictures, Response]:
        return self._send("PATCH", f"videos/{vid}/pictures/{pid}", Pictures, r)

    def delete_pictures(self, vid: int, pid: int) -> Response:
        return self._call("DELETE", f"videos/{vid}/pictures/{pid}")

    # Text tracks

    def list_text_track(self, vid: int, *opts: CallOption) -> tuple[list[TextTrack], Response]:
        return self._list(f"videos/{vid}/texttracks", TextTrack, *opts)

    def add_text_track(self, vid: int, r: TextTrackRequest) -> tuple[TextTrack, Response]:
        return self._send("POST", f"videos/{vid}/texttracks", TextTrack, r)

    def get_text_track(self, vid: int, tid: int, *opts: CallOption) -> tuple[TextTrack, Response]:
        return self._get(f"videos/{vid}/texttracks/{tid}", TextTrack, *opts)

    def edit_text_track(self, vid: int, tid: int, r: TextTrackRequest) -> tuple[TextTrack, Response]:
        return self._send("PATCH", f"videos/{vid}/texttracks/{tid}", TextTrack, r)

    def delete_text_track(self, vid: int, tid: int) -> Response:
        return self._call("DELETE", f"videos/{vid}/texttracks/{tid}")
