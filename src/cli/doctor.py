"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from jinja2 import TemplateError
from rich.console import Console
from rich.table import Table

from adapters.html_renderer import TemplatesNotFoundError, check_templates
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_templates(settings: AppSettings) -> tuple[bool, str]:
    """Compile every template to detect syntax errors early."""

    try:
        names = check_templates(settings)
    except (TemplatesNotFoundError, TemplateError) as exc:
        return False, str(exc)
    return True, f"{len(names)} templates: {', '.join(names)}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="docs-listing Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))
    table.add_row("Site version", "OK", settings.site_version)
    if settings.global_alert:
        table.add_row("Global alert", "ACTIVE", settings.global_alert)
    else:
        table.add_row("Global alert", "OK", "No alert set")
    if settings.rustc_resource_suffix:
        table.add_row("rustc suffix", "OK", settings.rustc_resource_suffix)
    else:
        table.add_row("rustc suffix", "OPTIONAL", "Not set -> templates show ???")

    # Templates
    ok_templates, detail_templates = _check_templates(settings)
    table.add_row("Templates", "OK" if ok_templates else "FAIL", detail_templates)

    _console.print(table)

    if not ok_templates:
        _console.print(
            "\n[yellow]Note:[/yellow] Unset DOCS_LISTING_TEMPLATES_DIR to use the packaged templates."
        )
        raise typer.Exit(code=1)
