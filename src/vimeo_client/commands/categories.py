"""Category commands: list, show, browse videos."""

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

app = typer.Typer(name="categories", help="Browse Vimeo categories.")


@app.command("list")
@error_handler
def list_categories(
    page: PageOpt = None,
    per_page: PerPageOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List all categories."""
    with make_client(profile, token) as client:
        cats, resp = client.categories.list(*page_options(page, per_page))
        rows = [
            [c.name, c.uri, "yes" if c.top_level else "", len(c.subcategories)]
            for c in cats
        ]
        output(
            cats, fmt,
            columns=["Name", "URI", "Top level", "Subcategories"], rows=rows,
            title="Categories", caption=page_caption(resp),
        )


@app.command()
@error_handler
def show(
    category: Annotated[str, typer.Argument(help="Category name, e.g. 'animation'")],
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a single category."""
    with make_client(profile, token) as client:
        cat, _ = client.categories.get(category)
        output(cat, fmt, title=f"Category: {cat.name or category}")


@app.command()
@error_handler
def videos(
    category: Annotated[str, typer.Argument(help="Category name")],
    page: PageOpt = None,
    per_page: PerPageOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List the videos in a category."""
    with make_client(profile, token) as client:
        vids, resp = client.categories.list_video(category, *page_options(page, per_page))
        output(
            vids, fmt, columns=VIDEO_COLUMNS, rows=video_rows(vids),
            title=f"Videos in {category}", caption=page_caption(resp),
        )
