"""Shared helpers for CLI commands: client factory, options, paging."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated

import httpx
import typer

from vimeo_client.client.auth import resolve_auth
from vimeo_client.client.options import CallOption, Page, PerPage
from vimeo_client.client.vimeo import Client, ClientConfig, Response
from vimeo_client.config.manager import ConfigManager

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Config profile"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="Access token override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: table, json, yaml, csv"),
]
PageOpt = Annotated[
    int | None,
    typer.Option("--page", min=1, help="Page number"),
]
PerPageOpt = Annotated[
    int | None,
    typer.Option("--per-page", min=1, help="Items per page"),
]


@contextmanager
def make_client(profile: str | None, token: str | None) -> Iterator[Client]:
    """Yield a Client built from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    resolved = mgr.resolve_profile(profile_name=profile, token=token)
    config = ClientConfig(base_url=resolved.base_url, user_agent=resolved.user_agent)
    with httpx.Client(auth=resolve_auth(resolved), timeout=resolved.timeout) as http:
        yield Client(http, config)


def page_options(page: int | None, per_page: int | None) -> list[CallOption]:
    """Translate --page/--per-page into call options."""
    opts: list[CallOption] = []
    if page is not None:
        opts.append(Page(page))
    if per_page is not None:
        opts.append(PerPage(per_page))
    return opts


def page_caption(resp: Response) -> str | None:
    """Table caption summarising the pagination block, if any."""
    if not resp.total:
        return None
    caption = f"Page {resp.page or 1}, {resp.total} total"
    if resp.next_page:
        caption += f" (next: {resp.next_page})"
    return caption
