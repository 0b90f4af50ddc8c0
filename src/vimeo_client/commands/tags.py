"""Tag commands."""

from __future__ import annotations

from typing import Annotated

import typer

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
from vimeo_client.output.formatter import output

app = typer.Typer(name="tags", help="Look up tags and tagged videos.")


@app.command()
@error_handler
def show(
    word: Annotated[str, typer.Argument(help="Tag word")],
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a tag."""
    with make_client(profile, token) as client:
        tag, _ = client.tags.get(word)
        output(tag, fmt, title=f"Tag: {word}")


@app.command()
@error_handler
def videos(
    word: Annotated[str, typer.Argument(help="Tag word")],
    page: PageOpt = None,
    per_page: PerPageOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List videos carrying a tag."""
    with make_client(profile, token) as client:
        vids, resp = client.tags.list_video(word, *page_options(page, per_page))
        output(
            vids, fmt, columns=VIDEO_COLUMNS, rows=video_rows(vids),
            title=f"Videos tagged '{word}'", caption=page_caption(resp),
        )
