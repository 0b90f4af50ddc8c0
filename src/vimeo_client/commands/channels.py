"""Channel commands: list, show, browse videos."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from vimeo_client.client.errors import error_handler
from vimeo_client.client.options import Query
from vimeo_client.commands._common import (
    FormatOpt,
    PageOpt,
    PerPageOpt,
    ProfileOpt,
    TokenOpt,
    make_client,
    page_caption,
    page_options,
)
from vimeo_client.commands.videos import VIDEO_COLUMNS, video_rows
from vimeo_client.models.common import id_from_uri
from vimeo_client.output.formatter import output

app = typer.Typer(name="channels", help="Browse Vimeo channels.")


@app.command("list")
@error_handler
def list_channels(
    query: Annotated[Optional[str], typer.Option("--query", "-q", help="Search query")] = None,
    page: PageOpt = None,
    per_page: PerPageOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List channels."""
    opts = page_options(page, per_page)
    if query:
        opts.append(Query(query))
    with make_client(profile, token) as client:
        items, resp = client.channels.list(*opts)
        rows = [[id_from_uri(c.uri), c.name, c.user.name if c.user else "", c.link] for c in items]
        output(
            items, fmt, columns=["ID", "Name", "Owner", "Link"], rows=rows,
            title="Channels", caption=page_caption(resp),
        )


@app.command()
@error_handler
def show(
    channel: Annotated[str, typer.Argument(help="Channel ID or slug")],
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a single channel."""
    with make_client(profile, token) as client:
        ch, _ = client.channels.get(channel)
        output(ch, fmt, title=f"Channel: {ch.name or channel}")


@app.command()
@error_handler
def videos(
    channel: Annotated[str, typer.Argument(help="Channel ID or slug")],
    page: PageOpt = None,
    per_page: PerPageOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List the videos in a channel."""
    with make_client(profile, token) as client:
        vids, resp = client.channels.list_video(channel, *page_options(page, per_page))
        output(
            vids, fmt, columns=VIDEO_COLUMNS, rows=video_rows(vids),
            title=f"Videos in channel {channel}", caption=page_caption(resp),
        )
