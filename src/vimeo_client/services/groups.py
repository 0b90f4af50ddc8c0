"""Groups endpoints.

Vimeo API docs: https://developer.vimeo.com/api/reference/groups
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vimeo_client.client.options import CallOption
from vimeo_client.models.channel import Group, GroupRequest
from vimeo_client.models.user import User
from vimeo_client.models.video import Video
from vimeo_client.services.base import Service

if TYPE_CHECKING:
    from vimeo_client.client.vimeo import Response


class GroupsService(Service):
    def list(self, *opts: CallOption) -> tuple[list[Group], Response]:
        return self._list("groups", Group, *opts)

    def create(self, r: GroupRequest) -> tuple[Group, Response]:
        return self._send("POST", "groups", Group, r)

    def get(self, gr: str, *opts: CallOption) -> tuple[Group, Response]:
        return self._get(f"groups/{gr}", Group, *opts)

    def delete(self, gr: str) -> Response:
        return self._call("DELETE", f"groups/{gr}")

    def list_user(self, gr: str, *opts: CallOption) -> tuple[list[User], Response]:
        return self._list(f"groups/{gr}/users", User, *opts)

    def list_video(self, gr: str, *opts: CallOption) -> tuple[list[Video], Response]:
        return self._list(f"groups/{gr}/videos", Video, *opts)

    def get_video(self, gr: str, vid: int, *opts: CallOption) -> tuple[Video, Response]:
        return self._get(f"groups/{gr}/videos/{vid}", Video, *opts)

    def add_video(self, gr: str, vid: int) -> Response:
        return self._call("PUT", f"groups/{gr}/videos/{vid}")

    def delete_video(self, gr: str, vid: int) -> Response:
        return self._call("DELETE", f"groups/{gr}/videos/{vid}")
