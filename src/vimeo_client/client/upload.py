"""Video upload helper.

The API hands out an upload ticket, the file bytes go to the ticket's upload
link through an Uploader, and deleting the ticket's completion URI yields the
new video's location.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Protocol

import httpx

from vimeo_client.client.errors import TransportError, UploadError
from vimeo_client.models.video import UploadTicket, UploadVideoOptions, Video

if TYPE_CHECKING:
    from vimeo_client.client.vimeo import Client, Response

logger = logging.getLogger(__name__)


class Uploader(Protocol):
    """Transfers the bytes of a local file to an upload link."""

    def upload_from_file(self, client: Client, upload_url: str, file_path: Path) -> None: ...


class StreamingUploader:
    """Resumable PUT upload against a streaming upload link.

    Each pass sends the remaining bytes with a Content-Range header, then
    asks the server how much it has received (``308`` + ``Range``). A timed
    out transfer goes straight to that check and resumes from the reported
    offset.
    """

    content_type = "application/octet-stream"

    def upload_from_file(self, client: Client, upload_url: str, file_path: Path) -> None:
        size = file_path.stat().st_size
        offset = 0
        while offset < size:
            logger.debug("Uploading %s from byte %d of %d", file_path.name, offset, size)
            with open(file_path, "rb") as f:
                f.seek(offset)
                request = self._chunk_request(client, upload_url, f, size, offset)
                try:
                    client.do(request)
                except TransportError as exc:
                    if not isinstance(exc.__cause__, httpx.TimeoutException):
                        raise
            offset = self.verify(client, upload_url)

    def _chunk_request(
        self, client: Client, upload_url: str, content: BinaryIO, size: int, offset: int,
    ) -> httpx.Request:
        headers = {
            "Content-Type": self.content_type,
            "Content-Length": str(size - offset),
            "Content-Range": f"bytes {offset}-{size - 1}/{size}",
        }
        if client.config.user_agent:
            headers["User-Agent"] = client.config.user_agent
        return httpx.Request("PUT", client.resolve(upload_url), headers=headers, content=content)

    def verify(self, client: Client, upload_url: str) -> int:
        """Return the number of bytes the server has stored so far."""
        headers = {"Content-Length": "0", "Content-Range": "bytes */*"}
        if client.config.user_agent:
            headers["User-Agent"] = client.config.user_agent
        request = httpx.Request("PUT", client.resolve(upload_url), headers=headers)
        _, resp = client.do(request)
        received = resp.headers.get("range", "")
        _, sep, last = received.partition("-")
        if not sep:
            raise UploadError(f"Upload check returned no usable Range header: {received!r}")
        try:
            return int(last) + 1
        except ValueError as exc:
            raise UploadError(f"Upload check returned bad Range header: {received!r}") from exc


def upload_video(
    client: Client, method: str, uri: str, file_path: Path | str,
) -> tuple[Video, Response]:
    """Upload *file_path* through a streaming ticket obtained from *uri*."""
    path = Path(file_path)
    if path.is_dir():
        raise UploadError("the video file can't be a directory")
    if not path.is_file():
        raise UploadError(f"No such file: {path}")

    req = client.new_request(method, uri, UploadVideoOptions(type="streaming"))
    ticket, _ = client.do(req, UploadTicket)
    upload_url = ticket.upload_link_secure or ticket.upload_link
    if not upload_url or not ticket.complete_uri:
        raise UploadError("Upload ticket is missing its upload link or completion URI")

    uploader = client.config.uploader or StreamingUploader()
    uploader.upload_from_file(client, upload_url, path)
    return complete_upload(client, ticket.complete_uri)


def complete_upload(client: Client, complete_uri: str) -> tuple[Video, Response]:
    """Close the upload ticket and fetch the video it created."""
    _, resp = client.do(client.new_request("DELETE", complete_uri))
    location = resp.location
    if not location:
        raise UploadError("Upload completion response has no Location header")
    return client.do(client.new_request("GET", location), Video)


def upload_video_by_url(client: Client, uri: str, video_url: str) -> tuple[Video, Response]:
    """Create a video that Vimeo pulls from *video_url*."""
    req = client.new_request("POST", uri, UploadVideoOptions(type="pull", link=video_url))
    return client.do(req, Video)
