"""craftdash CLI.

Each command plays the part of one dashboard view: it owns a `ListView` (or
the recipe edit form), drives it through the services layer and renders the
normalized state with Rich. All I/O goes through `HttpTransport`.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, List, Optional

import typer
from rich.console import Console

from adapters.http_client import HttpTransport
from cli import doctor
from cli.ui_components import (
    build_entity_table,
    build_page_footer,
    build_recipe_panel,
    build_resources_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.resources import ResourceSpec, get_resource
from core.exceptions import TransportError, UnknownResourceError
from core.logging_config import setup_logging
from core.services.list_view import ListView, coerce_page_size
from core.services.mutations import update_suggestion_status
from core.services.recipe_editor import RecipeEditForm, load_recipe_for_edit

app = typer.Typer(no_args_is_help=True, help="Admin dashboard lists over an inconsistent REST backend.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _open_transport(settings: AppSettings) -> HttpTransport:
    return HttpTransport(settings)


def _parse_filters(raw: List[str]) -> dict[str, str]:
    filters: dict[str, str] = {}
    for item in raw:
        if "=" not in item:
            raise typer.BadParameter(f"Filter '{item}' must look like key=value", param_hint="--filter")
        key, value = item.split("=", 1)
        if key.strip():
            filters[key.strip()] = value.strip()
    return filters


def _resolve(resource: str) -> ResourceSpec:
    try:
        return get_resource(resource)
    except UnknownResourceError as exc:
        raise typer.BadParameter(str(exc), param_hint="RESOURCE") from exc


def _dump(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))


async def _load_list(
    settings: AppSettings,
    spec: ResourceSpec,
    *,
    page: int,
    per_page: int,
    filters: dict[str, str],
) -> tuple[str, ListView]:
    async with _open_transport(settings) as api:
        view = ListView(
            api,
            spec,
            per_page=per_page,
            page_size_options=settings.page_size_options,
        )
        view.state.page = max(1, page)
        view.state.filters = filters
        outcome = await view.load()
    return outcome, view


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level)


@app.command("resources")
def resources_cmd() -> None:
    """List the resources the dashboard knows how to normalize."""

    _console.print(build_resources_table())


@app.command("list")
def list_cmd(
    resource: str = typer.Argument(..., help="Resource name, e.g. addons, orders, recipe-suggestions."),
    page: int = typer.Option(1, "--page", "-p", min=1),
    per_page: Optional[int] = typer.Option(None, "--per-page", "-n", min=1),
    filters: Optional[List[str]] = typer.Option(None, "--filter", "-f", help="key=value, repeatable."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """Fetch one page of a resource and render it."""

    settings = AppSettings()
    spec = _resolve(resource)
    requested = coerce_page_size(
        per_page or settings.default_per_page,
        settings.page_size_options,
        settings.default_per_page,
    )

    outcome, view = asyncio.run(
        _load_list(settings, spec, page=page, per_page=requested, filters=_parse_filters(filters or []))
    )
    state = view.state

    if outcome == "failed":
        _err_console.print(f"[red]Failed to load {spec.name}:[/red] {state.error}")
        raise typer.Exit(code=1)

    if as_json:
        _dump(
            {
                "items": [e.model_dump(mode="json", exclude={"raw"}) for e in state.items],
                "page": state.descriptor.model_dump(mode="json"),
            }
        )
        return

    print_banner(_console)
    if not state.items:
        _console.print(f"[dim]No {spec.name} found.[/dim]")
    else:
        _console.print(build_entity_table(spec, state.items))
    _console.print(build_page_footer(state.descriptor))
    if state.per_page != requested:
        _console.print(
            f"[yellow]Note:[/yellow] server returns {state.per_page} per page (requested {requested})."
        )


async def _load_recipe(settings: AppSettings, recipe_id: str) -> RecipeEditForm:
    async with _open_transport(settings) as api:
        return await load_recipe_for_edit(api, recipe_id)


@app.command("recipe")
def recipe_cmd(
    recipe_id: str = typer.Argument(..., help="Recipe id."),
    as_json: bool = typer.Option(False, "--json", help="Print the edit form (wire format) as JSON."),
) -> None:
    """Open a recipe for editing and show which ingredients each step uses."""

    settings = AppSettings()
    try:
        form = asyncio.run(_load_recipe(settings, recipe_id))
    except TransportError as exc:
        _err_console.print(f"[red]Failed to load recipe {recipe_id}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if as_json:
        _dump(form.to_payload(index_base=settings.ingredient_index_base))
        return
    _console.print(build_recipe_panel(form))


async def _set_status(settings: AppSettings, suggestion_id: str, status: str):
    async with _open_transport(settings) as api:
        return await update_suggestion_status(api, suggestion_id, status)


@app.command("suggestion-status")
def suggestion_status_cmd(
    suggestion_id: str = typer.Argument(..., help="Suggestion id."),
    status: str = typer.Argument(..., help="approved or rejected."),
) -> None:
    """Approve or reject a recipe suggestion."""

    settings = AppSettings()
    try:
        suggestion = asyncio.run(_set_status(settings, suggestion_id, status))
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="STATUS") from exc
    except TransportError as exc:
        _err_console.print(f"[red]Update failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    _console.print(f"[green]Updated[/green] suggestion {suggestion.id} marked {suggestion.status}.")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
