"""Reference data commands: languages, content ratings, Creative Commons."""

from __future__ import annotations

import typer

from vimeo_client.client.errors import error_handler
from vimeo_client.commands._common import FormatOpt, ProfileOpt, TokenOpt, make_client
from vimeo_client.output.formatter import output

app = typer.Typer(name="meta", help="List reference data used by video settings.")

COLUMNS = ["Code", "Name"]


@app.command()
@error_handler
def languages(
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List the languages a video can be tagged with."""
    with make_client(profile, token) as client:
        items, _ = client.languages.list()
        output(items, fmt, columns=COLUMNS, rows=[[i.code, i.name] for i in items], title="Languages")


@app.command("content-ratings")
@error_handler
def content_ratings(
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List content ratings."""
    with make_client(profile, token) as client:
        items, _ = client.content_ratings.list()
        output(
            items, fmt, columns=COLUMNS, rows=[[i.code, i.name] for i in items],
            title="Content Ratings",
        )


@app.command("creative-commons")
@error_handler
def creative_commons(
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List Creative Commons licenses."""
    with make_client(profile, token) as client:
        items, _ = client.creative_commons.list()
        output(
            items, fmt, columns=COLUMNS, rows=[[i.code, i.name] for i in items],
            title="Creative Commons",
        )
