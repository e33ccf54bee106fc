"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any, Callable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.entities import CanonicalEntity
from core.domain.models import PageDescriptor
from core.domain.resources import RESOURCES, ResourceSpec
from core.services.recipe_editor import RecipeEditForm

Column = tuple[str, Callable[[Any], object]]


def _money(value: object) -> str:
    try:
        return f"${float(value):,.2f}"  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return "" if value is None else str(value)


def _yes_no(value: object) -> str:
    return "yes" if value else "no"


# Columnas por recurso; las claves coinciden con `ResourceSpec.name`.
COLUMNS: dict[str, list[Column]] = {
    "addons": [
        ("ID", lambda e: e.addon_id),
        ("Name", lambda e: e.addon_name),
        ("Price", lambda e: _money(e.addon_price)),
        ("Active", lambda e: _yes_no(e.is_addon_active)),
        ("Images", lambda e: len(e.addon_images)),
    ],
    "users": [
        ("ID", lambda e: e.id),
        ("Name", lambda e: e.name),
        ("Email", lambda e: e.email),
        ("Status", lambda e: e.status),
        ("Created", lambda e: e.created_at),
    ],
    "orders": [
        ("Order ID", lambda e: e.id),
        ("Status", lambda e: e.status),
        ("Payment", lambda e: e.payment_status),
        ("Items", lambda e: len(e.order_items)),
        ("Subtotal", lambda e: _money(e.subtotal)),
        ("Delivery Fee", lambda e: _money(e.delivery_fee)),
        ("Total", lambda e: _money(e.total)),
    ],
    "products": [
        ("ID", lambda e: e.id),
        ("Name", lambda e: e.name),
        ("SKU", lambda e: e.sku),
        ("Price", lambda e: _money(e.price)),
        ("Stock", lambda e: e.stock),
        ("Status", lambda e: e.status),
        ("Tags", lambda e: ", ".join(e.tags)),
    ],
    "recipes": [
        ("ID", lambda e: e.id),
        ("Name", lambda e: e.name),
        ("Servings", lambda e: e.servings),
        ("Ingredients", lambda e: len(e.ingredients)),
        ("Steps", lambda e: len(e.steps)),
    ],
    "recipe-suggestions": [
        ("ID", lambda e: e.id),
        ("Status", lambda e: e.status),
        ("Summary", lambda e: e.summary),
        ("Macros", lambda e: e.macros_label),
        ("Created", lambda e: e.created_at),
    ],
}

_STATUS_STYLES = {
    "pending": "yellow",
    "approved": "green",
    "rejected": "red",
    "delivered": "green",
    "cancelled": "red",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("craftdash", style="bold cyan")
    subtitle = Text("Admin dashboard • Normalized lists", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _cell(value: object) -> Text:
    if value is None:
        return Text("—", style="dim")
    text = str(value)
    style = _STATUS_STYLES.get(text.lower(), "")
    return Text(text, style=style)


def build_entity_table(spec: ResourceSpec, entities: list[CanonicalEntity]) -> Table:
    """Tabla Rich para una página de entidades canónicas."""

    table = Table(title=spec.title or spec.name)
    columns = COLUMNS.get(spec.name, [("ID", lambda e: getattr(e, "id", None))])
    for header, _ in columns:
        table.add_column(header, no_wrap=header in ("ID", "Order ID"))
    for entity in entities:
        table.add_row(*(_cell(getter(entity)) for _, getter in columns))
    return table


def build_page_footer(descriptor: PageDescriptor) -> Text:
    text = Text(
        f"Page {descriptor.current_page} of {descriptor.last_page} • "
        f"Total {descriptor.total} • {descriptor.per_page} per page",
        style="dim",
    )
    if descriptor.has_next:
        text.append(f"  (next: {descriptor.next_page or descriptor.current_page + 1})", style="dim")
    return text


def build_resources_table() -> Table:
    table = Table(title="Resources")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Path", style="white")
    table.add_column("Array keys", style="dim")
    for spec in RESOURCES.values():
        table.add_row(spec.name, spec.path, ", ".join(spec.array_keys) or "—")
    return table


def build_recipe_panel(form: RecipeEditForm) -> Panel:
    """Panel del formulario de edición: ingredientes x pasos (checkboxes)."""

    table = Table(show_header=True, expand=False)
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Step")
    for idx, ingredient in enumerate(form.ingredients):
        table.add_column(ingredient.name or f"#{idx}", justify="center")

    for step_no, step in enumerate(form.steps, start=1):
        checked = set(step.ingredient_indices)
        marks = ["[x]" if idx in checked else "[ ]" for idx in range(len(form.ingredients))]
        table.add_row(str(step_no), step.description or "", *marks)

    title = Text(f"Recipe {form.id}: {form.name or ''}".strip(), style="bold yellow")
    return Panel(table, title=title, border_style="yellow")
