"""CLI principal (Typer).

Por qué una CLI:
- Hace de "caller" de referencia: carga una página de releases ya recortada,
  arma el `ListingContext` y delega el render al Core.
- Los efectos (stdout, ficheros, logging) se quedan aquí, fuera del Core.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from enum import Enum
from pathlib import Path

import typer
from jinja2 import TemplateError
from pydantic import AwareDatetime, TypeAdapter, ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.html_renderer import export_listing_html, render_listing_html
from adapters.json_exporter import dumps_listing, export_listing_json
from adapters.release_loader import load_releases
from cli import doctor
from cli.ui_components import build_pagination_text, build_releases_table, print_banner
from core.config import AppSettings
from core.domain.models import ListingContext
from core.services.listing_renderer import render_listing

app = typer.Typer(no_args_is_help=True, help="Render paginated release listings.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

_NOW_ADAPTER = TypeAdapter(AwareDatetime)


class OutputFormat(str, Enum):
    HTML = "html"
    JSON = "json"
    TABLE = "table"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True)],
        force=True,
    )


def _parse_now(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return _NOW_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise typer.BadParameter(f"--now must be an ISO-8601 timestamp with timezone: {value}") from exc


@app.command()
def render(
    releases_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON file with the releases of the current page (in display order).",
    ),
    release_type: str = typer.Option("recent", "--type", "-t", help="Listing type (recent, author, search, ...)."),
    page_number: int = typer.Option(1, "--page", "-p", help="Current page number."),
    show_previous_page: bool = typer.Option(False, "--prev", help="Emit a previous-page link."),
    show_next_page: bool = typer.Option(False, "--next", help="Emit a next-page link."),
    search_query: str | None = typer.Option(None, "--search", "-s", help="Search query (search listings only)."),
    title: str = typer.Option("Releases", "--title", help="Listing title."),
    description: str = typer.Option("", "--description", help="Listing description."),
    author: str | None = typer.Option(None, "--author", help="Author label for author listings."),
    now: str | None = typer.Option(None, "--now", help="Render as if at this instant (ISO-8601, with timezone)."),
    output_format: OutputFormat = typer.Option(OutputFormat.TABLE, "--format", "-f", help="Output format."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write html/json output to this path."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Render one page of a release listing."""

    settings = AppSettings()
    _configure_logging("DEBUG" if verbose else settings.log_level)

    if output is not None and output_format is OutputFormat.TABLE:
        raise typer.BadParameter("--output requires --format html or json")

    render_at = _parse_now(now)

    try:
        releases = load_releases(releases_file)
    except (json.JSONDecodeError, ValidationError) as exc:
        _err_console.print(f"[red]Invalid releases file {releases_file}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    context = ListingContext(
        release_type=release_type,
        page_number=page_number,
        show_previous_page=show_previous_page,
        show_next_page=show_next_page,
        search_query=search_query,
        title=title,
        description=description,
        author=author,
    )
    page = render_listing(releases, context, now=render_at)

    if output_format is OutputFormat.TABLE:
        print_banner(_console, page)
        _console.print(build_releases_table(page))
        pagination = build_pagination_text(page)
        if pagination:
            _console.print(pagination)
        return

    if output_format is OutputFormat.JSON:
        if output is not None:
            path = export_listing_json(page=page, output_path=output)
            _console.print(f"[green]JSON written to:[/green] {path}")
        else:
            typer.echo(dumps_listing(page), nl=False)
        return

    try:
        if output is not None:
            path = export_listing_html(page=page, output_path=output, settings=settings)
            _console.print(f"[green]HTML written to:[/green] {path}")
        else:
            typer.echo(render_listing_html(page=page, settings=settings))
    except (FileNotFoundError, TemplateError) as exc:
        _err_console.print(f"[red]Template rendering failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()
