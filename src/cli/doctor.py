"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    url = f"{settings.base_url.rstrip('/')}/artist?query=artist:test&limit=1&fmt=json"
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Show the effective configuration and check connectivity."""

    settings = AppSettings()
    print_banner(_console)

    table = Table(title="mb-artists doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    if "(" in settings.user_agent and ")" in settings.user_agent:
        table.add_row("User-Agent", "OK", settings.user_agent)
    else:
        table.add_row("User-Agent", "WARN", f"{settings.user_agent} (no contact info)")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "NONE", str(get_user_env_file()))

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup of the User-Agent (stored in the user config .env).

    MusicBrainz asks clients to identify themselves with an application name,
    version and a contact (URL or e-mail).
    """

    app_name = typer.prompt("Application name", default="mb-artists", show_default=True).strip()
    app_version = typer.prompt("Application version", default="0.1.0", show_default=True).strip()
    contact = typer.prompt("Contact (e-mail or URL)").strip()

    if not app_name or not contact:
        raise typer.BadParameter("application name and contact are required")

    env_path = write_user_env_vars(
        {"MB_ARTISTS_USER_AGENT": f"{app_name}/{app_version or '0'} ( {contact} )"}
    )

    _console.print(f"[green]Saved User-Agent to:[/green] {env_path}")
