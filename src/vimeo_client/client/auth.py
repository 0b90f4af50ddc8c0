"""Authentication for the Vimeo API."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from vimeo_client.config.models import Profile


class BearerTokenAuth(httpx.Auth):
    """Authenticate with an OAuth2 access token (Authorization: bearer)."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"bearer {self.token}"
        yield request


def resolve_auth(profile: Profile) -> httpx.Auth | None:
    """Resolve authentication from a profile."""
    if profile.token:
        return BearerTokenAuth(profile.token)
    return None
