"""Call options: optional query parameters shared by every list/get endpoint.

Each option contributes exactly one ``(key, value)`` pair to the query
string; multi-valued options are comma-joined under a single key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from vimeo_client.client.errors import RequestBuildError


@dataclass(frozen=True)
class CallOption:
    """Base class for an optional argument to an API call."""

    key: ClassVar[str] = ""

    def value(self) -> str:
        raise NotImplementedError

    def get(self) -> tuple[str, str]:
        return self.key, self.value()


@dataclass(frozen=True)
class _Scalar(CallOption):
    raw: int | str

    def value(self) -> str:
        return str(self.raw)


@dataclass(frozen=True)
class _Joined(CallOption):
    items: tuple[str, ...]

    def __init__(self, items: list[str] | tuple[str, ...]) -> None:
        object.__setattr__(self, "items", tuple(items))

    def value(self) -> str:
        return ",".join(self.items)


class Page(_Scalar):
    """Page number of the results to show."""

    key = "page"


class PerPage(_Scalar):
    """Number of items to show on each page."""

    key = "per_page"


class Sort(_Scalar):
    """Sort key, e.g. ``date`` or ``alphabetical``."""

    key = "sort"


class Direction(_Scalar):
    """Sort direction; all sortable resources accept ``asc`` or ``desc``."""

    key = "direction"


class Query(_Scalar):
    """Free-text search query."""

    key = "query"


class Filter(_Scalar):
    key = "filter"


class FilterEmbeddable(_Scalar):
    key = "filter_embeddable"


class FilterPlayable(_Scalar):
    key = "filter_playable"


class FilterContentRating(_Joined):
    """Exclude videos that match none of the given ratings.

    Valid ratings: language, drugs, violence, nudity, safe, unrated.
    """

    key = "filter_content_rating"


class Fields(_Joined):
    """Restrict the response to the listed fields."""

    key = "fields"


@dataclass(frozen=True)
class WeakSearch(CallOption):
    """Use the legacy search backend, which can find private videos."""

    key: ClassVar[str] = "weak_search"
    enabled: bool = True

    def value(self) -> str:
        return "true" if self.enabled else "false"


def split_url(path: str) -> SplitResult:
    """Parse *path*, raising RequestBuildError when it is malformed."""
    if path.startswith(":"):
        raise RequestBuildError(f"Cannot parse {path!r}: missing protocol scheme")
    try:
        return urlsplit(path)
    except ValueError as exc:
        raise RequestBuildError(f"Cannot parse {path!r}: {exc}") from exc


def add_options(path: str, *opts: CallOption) -> str:
    """Merge call options into the query string of *path*.

    Parameters already present on *path* are kept unless an option targets
    the same key; later options win. Keys are emitted in sorted order.
    """
    parts = split_url(path)
    query: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        query.setdefault(key, []).append(value)
    for opt in opts:
        key, value = opt.get()
        query[key] = [value]

    encoded = urlencode(
        [(key, value) for key in sorted(query) for value in query[key]]
    )
    return urlunsplit(parts._replace(query=encoded))
