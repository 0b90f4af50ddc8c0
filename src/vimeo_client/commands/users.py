"""User commands: profile, videos, albums, upload."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from vimeo_client.client.errors import error_handler
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

app = typer.Typer(name="users", help="Inspect users and upload videos.")
console = Console()

UserOpt = Annotated[
    str,
    typer.Option("--user", "-u", help="User ID (defaults to the authenticated user)"),
]


@app.command()
@error_handler
def show(
    user: UserOpt = "",
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a user profile."""
    with make_client(profile, token) as client:
        u, _ = client.users.get(user)
        output(u, fmt, title=f"User: {u.name or user or 'me'}")


@app.command()
@error_handler
def videos(
    user: UserOpt = "",
    page: PageOpt = None,
    per_page: PerPageOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List a user's videos."""
    with make_client(profile, token) as client:
        vids, resp = client.users.list_video(user, *page_options(page, per_page))
        output(
            vids, fmt, columns=VIDEO_COLUMNS, rows=video_rows(vids),
            title="Videos", caption=page_caption(resp),
        )


@app.command()
@error_handler
def albums(
    user: UserOpt = "",
    page: PageOpt = None,
    per_page: PerPageOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List a user's albums (showcases)."""
    with make_client(profile, token) as client:
        items, resp = client.users.list_album(user, *page_options(page, per_page))
        rows = [[id_from_uri(a.uri), a.name, a.duration, a.link] for a in items]
        output(
            items, fmt, columns=["ID", "Name", "Duration", "Link"], rows=rows,
            title="Albums", caption=page_caption(resp),
        )


@app.command()
@error_handler
def upload(
    source: Annotated[str, typer.Argument(help="Local file path, or a public URL with --pull")],
    pull: Annotated[bool, typer.Option("--pull", help="Let Vimeo fetch the video from a URL")] = False,
    user: UserOpt = "",
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Upload a video from a local file or a URL."""
    with make_client(profile, token) as client:
        if pull:
            video, _ = client.users.upload_video_by_url(user, source)
        else:
            video, _ = client.users.upload_video(user, Path(source))
    if fmt == "table":
        console.print(f"[green]Uploaded:[/] {video.uri or ''}")
    else:
        output(video, fmt)
