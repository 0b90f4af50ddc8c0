"""Video commands: list, show, comments, delete."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from vimeo_client.client.errors import error_handler
from vimeo_client.client.options import Query, Sort
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
from vimeo_client.models.video import Video
from vimeo_client.output.formatter import output

app = typer.Typer(name="videos", help="Search, inspect and delete videos.")
console = Console()

VIDEO_COLUMNS = ["ID", "Name", "Duration", "Status", "Link"]


def video_rows(vids: list[Video]) -> list[list[object]]:
    return [[v.id or "", v.name, v.duration, v.status, v.link] for v in vids]


@app.command("list")
@error_handler
def list_videos(
    query: Annotated[str, typer.Option("--query", "-q", help="Search query")],
    sort: Annotated[Optional[str], typer.Option("--sort", help="Sort order")] = None,
    page: PageOpt = None,
    per_page: PerPageOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Search public videos."""
    opts = [Query(query), *page_options(page, per_page)]
    if sort:
        opts.append(Sort(sort))
    with make_client(profile, token) as client:
        vids, resp = client.videos.list(*opts)
        output(
            vids, fmt, columns=VIDEO_COLUMNS, rows=video_rows(vids),
            title=f"Videos matching '{query}'", caption=page_caption(resp),
        )


@app.command()
@error_handler
def show(
    video_id: Annotated[int, typer.Argument(help="Video ID")],
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a single video."""
    with make_client(profile, token) as client:
        video, _ = client.videos.get(video_id)
        output(video, fmt, title=f"Video {video_id}")


@app.command()
@error_handler
def comments(
    video_id: Annotated[int, typer.Argument(help="Video ID")],
    page: PageOpt = None,
    per_page: PerPageOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List comments on a video."""
    with make_client(profile, token) as client:
        items, resp = client.videos.list_comment(video_id, *page_options(page, per_page))
        rows = [
            [c.user.name if c.user else "", c.created_on, c.text]
            for c in items
        ]
        output(
            items, fmt, columns=["Author", "Created", "Text"], rows=rows,
            title=f"Comments on {video_id}", caption=page_caption(resp),
        )


@app.command()
@error_handler
def delete(
    video_id: Annotated[int, typer.Argument(help="Video ID")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete a video."""
    if not force and not Confirm.ask(f"Delete video {video_id}?"):
        console.print("Cancelled.")
        return
    with make_client(profile, token) as client:
        client.videos.delete(video_id)
    console.print(f"[green]Video {video_id} deleted.[/]")
