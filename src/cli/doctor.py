"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("/")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="craftdash Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)
    if settings.auth_token:
        table.add_row("Auth token", "OK", "Bearer token configured")
    else:
        table.add_row("Auth token", "MISSING", "Run `craftdash doctor set-token`")
    table.add_row("Page sizes", "OK", ", ".join(str(s) for s in settings.page_size_options))
    table.add_row("Ingredient index base", "OK", str(settings.ingredient_index_base))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="set-token")
def set_token() -> None:
    """Store the API base URL and bearer token in the user config .env."""

    settings = AppSettings()
    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()
    token = typer.prompt("Auth token", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not token:
        raise typer.BadParameter("base_url and token are required")

    env_path = write_user_env_vars(
        {
            "CRAFTDASH_API_BASE_URL": base_url,
            "CRAFTDASH_AUTH_TOKEN": token,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
