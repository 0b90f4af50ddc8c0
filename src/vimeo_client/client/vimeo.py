"""Vimeo API client: request building, response handling, pagination."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import unquote_plus, urlsplit, urlunsplit

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from vimeo_client.client.errors import (
    APIError,
    AuthenticationError,
    DecodeError,
    NotFoundError,
    Rate,
    RateLimitError,
    RequestBuildError,
    SerializationError,
    TransportError,
)
from vimeo_client.client.options import split_url
from vimeo_client.config.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    HEADER_RATE_LIMIT,
    HEADER_RATE_REMAINING,
    HEADER_RATE_RESET,
    MEDIA_TYPE_VERSION,
)
from vimeo_client.models.common import ErrorEnvelope
from vimeo_client.services.categories import CategoriesService
from vimeo_client.services.channels import ChannelsService
from vimeo_client.services.groups import GroupsService
from vimeo_client.services.metadata import (
    ContentRatingsService,
    CreativeCommonsService,
    LanguagesService,
)
from vimeo_client.services.tags import TagsService
from vimeo_client.services.users import UsersService
from vimeo_client.services.videos import VideosService

if TYPE_CHECKING:
    from vimeo_client.client.upload import Uploader

logger = logging.getLogger(__name__)

REDACTED = "REDACTED"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client settings shared by every call.

    ``base_url`` should end with a slash so that relative paths resolve
    beneath it. An empty ``user_agent`` suppresses the User-Agent header.
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    uploader: Uploader | None = None


class Paginator(Protocol):
    def get_page(self) -> int: ...

    def get_total(self) -> int: ...

    def get_paging(self) -> tuple[str, str, str, str]: ...


@dataclass
class Response:
    """A Vimeo response: the raw httpx response plus pagination links."""

    http_response: httpx.Response | None = None
    page: int = 0
    total: int = 0
    total_pages: int = 0
    next_page: str = ""
    prev_page: str = ""
    first_page: str = ""
    last_page: str = ""

    @property
    def status_code(self) -> int:
        return self.http_response.status_code if self.http_response is not None else 0

    @property
    def headers(self) -> httpx.Headers:
        if self.http_response is None:
            return httpx.Headers()
        return self.http_response.headers

    @property
    def location(self) -> str | None:
        return self.headers.get("location")

    def set_paging(self, p: Paginator) -> None:
        self.page = p.get_page()
        self.total = p.get_total()
        # total_pages mirrors total for callers of the older field name
        self.total_pages = self.total
        self.next_page, self.prev_page, self.first_page, self.last_page = p.get_paging()


def is_success(status_code: int) -> bool:
    """2xx is success; 308 continues an upload and counts as success too."""
    return 200 <= status_code <= 299 or status_code == 308


def sanitize_url(url: str) -> str:
    """Redact the value of a ``client_secret`` query parameter."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    pieces = parts.query.split("&")
    changed = False
    for i, piece in enumerate(pieces):
        key, _, value = piece.partition("=")
        if unquote_plus(key) == "client_secret" and value and value != REDACTED:
            pieces[i] = f"{key}={REDACTED}"
            changed = True
    if not changed:
        return url
    return urlunsplit(parts._replace(query="&".join(pieces)))


def parse_rate(headers: httpx.Headers) -> Rate:
    """Parse the X-RateLimit-* headers; malformed values are left at zero."""
    limit = remaining = 0
    reset = None
    if value := headers.get(HEADER_RATE_RESET):
        # fromisoformat only accepts a "Z" suffix from Python 3.11 on
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        try:
            reset = datetime.fromisoformat(value)
        except ValueError:
            reset = None
    if value := headers.get(HEADER_RATE_LIMIT):
        try:
            limit = int(value)
        except ValueError:
            limit = 0
    if value := headers.get(HEADER_RATE_REMAINING):
        try:
            remaining = int(value)
        except ValueError:
            remaining = 0
    return Rate(limit=limit, remaining=remaining, reset=reset)


def check_response(http_response: httpx.Response, response: Response | None = None) -> None:
    """Raise an APIError subclass unless the status code signals success.

    Error bodies are expected to be empty or ``{"error": "..."}``; any other
    body leaves the message empty.
    """
    status = http_response.status_code
    if is_success(status):
        return

    message = ""
    data = http_response.read()
    if data.strip():
        try:
            message = ErrorEnvelope.model_validate_json(data).error
        except ValidationError:
            message = ""

    request = http_response.request
    method = request.method
    url = sanitize_url(str(request.url))
    response = response or Response(http_response)

    if status == 429 and http_response.headers.get(HEADER_RATE_REMAINING) == "0":
        raise RateLimitError(
            method, url, status, message,
            response=response, rate=parse_rate(http_response.headers),
        )
    if status in (401, 403):
        raise AuthenticationError(method, url, status, message, response=response)
    if status == 404:
        raise NotFoundError(method, url, status, message, response=response)
    raise APIError(method, url, status, message, response=response)


def _encode_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON bytes."""
    try:
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(
            body, separators=(",", ":"), allow_nan=False, default=_encode_default,
        ).encode()
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode request body: {exc}") from exc


def decode_body(data: bytes, target: type[BaseModel]) -> BaseModel:
    """Decode *data* into *target*; an empty body yields ``target()``."""
    if not data.strip():
        return target()
    try:
        return target.model_validate_json(data)
    except ValidationError as exc:
        raise DecodeError(f"Cannot decode response as {target.__name__}: {exc}") from exc


class Client:
    """Synchronous HTTP client for the Vimeo API.

    Authentication belongs to the injected ``httpx.Client``, e.g.
    ``httpx.Client(auth=BearerTokenAuth(token))``.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        try:
            self.base_url = httpx.URL(self.config.base_url)
        except httpx.InvalidURL as exc:
            raise RequestBuildError(f"Invalid base URL {self.config.base_url!r}: {exc}") from exc
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client()

        self.categories = CategoriesService(self)
        self.channels = ChannelsService(self)
        self.content_ratings = ContentRatingsService(self)
        self.creative_commons = CreativeCommonsService(self)
        self.groups = GroupsService(self)
        self.languages = LanguagesService(self)
        self.tags = TagsService(self)
        self.videos = VideosService(self)
        self.users = UsersService(self)

    @property
    def http_client(self) -> httpx.Client:
        return self._http

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def resolve(self, path: str) -> httpx.URL:
        """Resolve *path* against the base URL (RFC 3986 reference resolution)."""
        split_url(path)
        try:
            return self.base_url.join(path)
        except httpx.InvalidURL as exc:
            raise RequestBuildError(f"Cannot resolve {path!r}: {exc}") from exc

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Build a request for *path*; no network I/O happens here."""
        url = self.resolve(path)
        headers = {"Accept": MEDIA_TYPE_VERSION}
        content = None
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = "application/json"
        if self.config.user_agent:
            headers["User-Agent"] = self.config.user_agent
        return httpx.Request(method, url, headers=headers, content=content)

    def do(self, request: httpx.Request, target: Any = None) -> tuple[Any, Response]:
        """Send *request* once and decode the body into *target*.

        *target* may be a pydantic model class, which is decoded from JSON,
        or a writable sink (anything with ``write``), which receives the raw
        body. Without a target the body is discarded. Non-success statuses
        raise an APIError carrying the partially populated Response.
        """
        safe_url = sanitize_url(str(request.url))
        logger.debug("%s %s", request.method, safe_url)
        try:
            http_response = self._http.send(request, stream=True)
        except httpx.TransportError as exc:
            raise TransportError(f"{request.method} {safe_url}: {exc}") from exc

        response = Response(http_response)
        try:
            logger.debug("%s %s -> %d", request.method, safe_url, http_response.status_code)
            check_response(http_response, response)
            if target is None:
                return None, response
            if hasattr(target, "write"):
                for chunk in http_response.iter_bytes():
                    target.write(chunk)
                return target, response
            return decode_body(http_response.read(), target), response
        except httpx.TransportError as exc:
            raise TransportError(f"{request.method} {safe_url}: {exc}") from exc
        finally:
            http_response.close()
