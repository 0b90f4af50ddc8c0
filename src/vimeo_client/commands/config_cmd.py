"""Config commands: manage API profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from vimeo_client.client.errors import error_handler
from vimeo_client.config.constants import DEFAULT_BASE_URL
from vimeo_client.config.manager import ConfigManager
from vimeo_client.config.models import Profile
from vimeo_client.output.formatter import output

app = typer.Typer(name="config", help="Manage API profiles and CLI configuration.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _mask(token: str) -> str:
    return token[:6] + "..." if len(token) > 6 else "***"


@app.command()
@error_handler
def init() -> None:
    """Interactive setup wizard: create your first profile."""
    mgr = _get_manager()
    console.print("[bold]vimeo-client setup[/]\n")

    name = Prompt.ask("Profile name", default="default")
    token = Prompt.ask("Access token (developer.vimeo.com/apps)")
    base_url = Prompt.ask("API base URL", default=DEFAULT_BASE_URL)

    mgr.add_profile(Profile(name=name, token=token or None, base_url=base_url))
    console.print(f"\n[green]Profile '{name}' saved.[/]")
    console.print(f"Config file: {mgr.config_path}")


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    token: Annotated[str, typer.Option("--token", "-t", help="Access token")],
    base_url: Annotated[str, typer.Option("--base-url", help="API base URL")] = DEFAULT_BASE_URL,
    user_agent: Annotated[Optional[str], typer.Option("--user-agent", help="User-Agent header")] = None,
    timeout: Annotated[Optional[float], typer.Option("--timeout", help="Request timeout (s)")] = None,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a profile."""
    mgr = _get_manager()
    fields: dict[str, object] = {"name": name, "token": token, "base_url": base_url}
    if user_agent is not None:
        fields["user_agent"] = user_agent
    if timeout is not None:
        fields["timeout"] = timeout
    mgr.add_profile(Profile(**fields))
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'vimeo-client config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    rows = [
        [name, p.base_url, "token" if p.auth_configured else "none", "*" if name == default else ""]
        for name, p in profiles.items()
    ]
    output(
        [p.model_dump(exclude={"token"}) for p in profiles.values()],
        fmt,
        columns=["Name", "Base URL", "Auth", "Default"],
        rows=rows,
        title="Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (default if omitted)")] = None,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name or 'default'}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(exclude_none=True)
    if "token" in data:
        data["token"] = _mask(data["token"])
    output(data, fmt, title=f"Profile: {profile.name}")


@app.command()
@error_handler
def use(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
