"""Shared plumbing for resource services.

Every endpoint has the same shape: build a path, apply call options, send
one request and decode one JSON body. List endpoints additionally copy the
pagination block onto the Response.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel

from vimeo_client.client.options import CallOption, add_options
from vimeo_client.models.common import DataList

if TYPE_CHECKING:
    from vimeo_client.client.vimeo import Client, Response

M = TypeVar("M", bound=BaseModel)


def user_path(uid: str, suffix: str = "") -> str:
    """Path for a user-scoped resource; an empty *uid* targets ``me``."""
    base = f"users/{uid}" if uid else "me"
    return f"{base}/{suffix}" if suffix else base


class Service:
    """Base class for a group of related API endpoints."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def _list(
        self, path: str, model: type[M], *opts: CallOption,
    ) -> tuple[list[M], Response]:
        req = self.client.new_request("GET", add_options(path, *opts))
        envelope, resp = self.client.do(req, DataList[model])
        resp.set_paging(envelope)
        return envelope.data, resp

    def _get(self, path: str, model: type[M], *opts: CallOption) -> tuple[M, Response]:
        req = self.client.new_request("GET", add_options(path, *opts))
        result, resp = self.client.do(req, model)
        return result, resp

    def _send(
        self, method: str, path: str, model: type[M], body: Any = None,
    ) -> tuple[M, Response]:
        req = self.client.new_request(method, path, body)
        result, resp = self.client.do(req, model)
        return result, resp

    def _call(self, method: str, path: str) -> Response:
        _, resp = self.client.do(self.client.new_request(method, path))
        return resp
