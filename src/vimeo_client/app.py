"""Root Typer app: global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from vimeo_client import __version__
from vimeo_client.commands import (
    api,
    categories,
    channels,
    config_cmd,
    groups,
    meta,
    tags,
    users,
    videos,
)

app = typer.Typer(
    name="vimeo-client",
    help="Command-line client for the Vimeo REST API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"vimeo-client {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send library debug logs to stderr when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    # httpx/httpcore are chatty at DEBUG; the client already logs each call
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each API call to stderr."),
) -> None:
    """Vimeo CLI: browse categories, channels, videos and users; upload videos."""
    configure_logging(verbose)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(categories.app, name="categories")
app.add_typer(channels.app, name="channels")
app.add_typer(groups.app, name="groups")
app.add_typer(tags.app, name="tags")
app.add_typer(videos.app, name="videos")
app.add_typer(users.app, name="users")
app.add_typer(meta.app, name="meta")
app.add_typer(api.app, name="api")


def main() -> None:
    app()
