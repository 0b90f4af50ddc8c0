"""Raw API commands: direct HTTP access to any endpoint."""

from __future__ import annotations

import io
import json
from typing import Annotated, Any, Optional

import typer
from rich.console import Console

from vimeo_client.client.errors import error_handler
from vimeo_client.client.vimeo import Client
from vimeo_client.commands._common import FormatOpt, ProfileOpt, TokenOpt, make_client
from vimeo_client.output.formatter import output

app = typer.Typer(name="api", help="Raw API access.")
console = Console()

PathArg = Annotated[str, typer.Argument(help="API path relative to the base URL (e.g. me/videos)")]
DataOpt = Annotated[Optional[str], typer.Option("--data", "-d", help="JSON body")]


def _parse_body(data: str | None) -> Any:
    if not data:
        return None
    try:
        return json.loads(data)
    except json.JSONDecodeError:
        console.print("[red]Invalid JSON body.[/]")
        raise typer.Exit(1)


def _send(client: Client, method: str, path: str, body: Any, fmt: str) -> None:
    sink = io.BytesIO()
    _, resp = client.do(client.new_request(method, path, body), sink)
    raw = sink.getvalue()
    if not raw.strip():
        console.print(f"[green]{resp.status_code}[/] {method} {path}")
        return
    if "json" in resp.headers.get("content-type", ""):
        output(json.loads(raw), fmt)
    else:
        console.print(raw.decode(errors="replace"), markup=False)


@app.command("get")
@error_handler
def api_get(
    path: PathArg,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "json",
) -> None:
    """Send a GET request."""
    with make_client(profile, token) as client:
        _send(client, "GET", path, None, fmt)


@app.command("post")
@error_handler
def api_post(
    path: PathArg,
    body: DataOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "json",
) -> None:
    """Send a POST request."""
    json_body = _parse_body(body)
    with make_client(profile, token) as client:
        _send(client, "POST", path, json_body, fmt)


@app.command("patch")
@error_handler
def api_patch(
    path: PathArg,
    body: DataOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "json",
) -> None:
    """Send a PATCH request."""
    json_body = _parse_body(body)
    with make_client(profile, token) as client:
        _send(client, "PATCH", path, json_body, fmt)


@app.command("put")
@error_handler
def api_put(
    path: PathArg,
    body: DataOpt = None,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "json",
) -> None:
    """Send a PUT request."""
    json_body = _parse_body(body)
    with make_client(profile, token) as client:
        _send(client, "PUT", path, json_body, fmt)


@app.command("delete")
@error_handler
def api_delete(
    path: PathArg,
    profile: ProfileOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "json",
) -> None:
    """Send a DELETE request."""
    with make_client(profile, token) as client:
        _send(client, "DELETE", path, None, fmt)
