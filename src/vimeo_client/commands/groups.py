"""Group commands."""

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
from vimeo_client.models.common import id_from_uri
from vimeo_client.output.formatter import output

app = typer.Typer(name="groups", help="Browse Vimeo groups.")


@app.command("list")
@error_handler
def list_groups(
    query: Annotated[Optional[str], typer.Option("--query", "-q", help="Search query")] = None,
    page: PageOpt = None,
    per_page: PerPageOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List groups."""
    opts = page_options(page, per_page)
    if query:
        opts.append(Query(query))
    with make_client(profile, token) as client:
        items, resp = client.groups.list(*opts)
        rows = [[id_from_uri(g.uri), g.name, g.link] for g in items]
        output(
            items, fmt, columns=["ID", "Name", "Link"], rows=rows,
            title="Groups", caption=page_caption(resp),
        )


@app.command()
@error_handler
def show(
    group: Annotated[str, typer.Argument(help="Group ID or slug")],
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a single group."""
    with make_client(profile, token) as client:
        gr, _ = client.groups.get(group)
        output(gr, fmt, title=f"Group: {gr.name or group}")
