"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `render` y `doctor`.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ListingPage, ReleaseRow


def print_banner(console: Console, page: ListingPage) -> None:
    """Cabecera del listado: título (o autor) y descripción."""

    title = Text(page.author or page.title, style="bold cyan")
    body = Text.assemble(title)
    if page.description:
        body.append("\n")
        body.append(page.description, style="dim")
    console.print(Panel(body, border_style="cyan", padding=(0, 2)))


def _metadata_cells(row: ReleaseRow) -> tuple[str, str]:
    metadata = row.metadata
    if metadata.kind == "stars":
        return f"{metadata.stars} ★", metadata.tooltip
    return metadata.text, metadata.tooltip


def build_releases_table(page: ListingPage) -> Table:
    table = Table(title=f"{page.release_type} · page {page.page_number}")
    table.add_column("Release", style="cyan", no_wrap=True)
    table.add_column("Link", style="magenta")
    table.add_column("Description", style="white")
    table.add_column("Info", style="green", no_wrap=True)
    table.add_column("Tooltip", style="dim")
    for row in page.rows:
        info, tooltip = _metadata_cells(row)
        table.add_row(row.label, row.href, row.description, info, tooltip)
    return table


def build_pagination_text(page: ListingPage) -> Text:
    text = Text()
    if page.pagination.previous_href:
        text.append("← Previous Page ", style="bold")
        text.append(page.pagination.previous_href, style="magenta")
    if page.pagination.next_href:
        if text:
            text.append("   ")
        text.append("Next Page → ", style="bold")
        text.append(page.pagination.next_href, style="magenta")
    return text
