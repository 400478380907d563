"""Render HTML de listados de releases.

Por qué está en adapters:
- HTML es un detalle de infraestructura (Jinja2).
- El Core solo conoce `ListingPage`; aquí se decide el marcado.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.config import AppSettings
from core.domain.models import ListingPage
from core.services.timeformat import dedent, duration_to_str, format_duration

logger = logging.getLogger(__name__)

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

LISTING_TEMPLATE = "releases.html"


class TemplatesNotFoundError(FileNotFoundError):
    """El directorio de plantillas configurado no existe."""


def _templates_dir(settings: AppSettings) -> Path:
    templates_dir = settings.templates_dir or _TEMPLATES_DIR
    if not templates_dir.is_dir():
        raise TemplatesNotFoundError(f"templates directory not found: {templates_dir}")
    return templates_dir


def timeformat(value: Any, relative: bool = False, now: datetime | None = None) -> str:
    """Filtro `timeformat`.

    - `relative=True`: `value` es un datetime (o su forma RFC3339 serializada)
      y se pinta como "3 days ago".
    - Si no, `value` son segundos y se pinta como duración ("1.5 minutes").
    """

    if relative:
        return duration_to_str(_parse_timestamp(value), now)
    return format_duration(value)


def _parse_timestamp(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    # fromisoformat no acepta el sufijo "Z" antes de Python 3.11.
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _return_value(value: Any) -> Callable[[], Any]:
    # Función sin argumentos que devuelve un valor fijo de configuración.
    def _fn() -> Any:
        return value

    return _fn


def _resource_suffix(settings: AppSettings) -> str:
    if settings.rustc_resource_suffix:
        return settings.rustc_resource_suffix
    _warn_missing_suffix()
    return "???"


@lru_cache(maxsize=None)
def _warn_missing_suffix() -> None:
    # No es fatal: el sitio puede arrancar antes de que exista el primer build.
    # Se avisa una sola vez por proceso.
    logger.warning("rustc resource suffix not configured, templates will show ???")


def build_environment(settings: AppSettings | None = None) -> Environment:
    """Crea el `Environment` Jinja2 con filtros y globals del sitio."""

    settings = settings or AppSettings()
    templates_dir = _templates_dir(settings)

    logger.debug("Loading templates from %s", templates_dir)
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        auto_reload=settings.templates_auto_reload,
        trim_blocks=True,
        lstrip_blocks=True,
    )

    env.filters["timeformat"] = timeformat
    env.filters["dedent"] = dedent

    env.globals["global_alert"] = _return_value(settings.global_alert)
    env.globals["site_version"] = _return_value(settings.site_version)
    env.globals["rustc_resource_suffix"] = _return_value(_resource_suffix(settings))

    logger.debug("Finished loading templates")
    return env


def check_templates(settings: AppSettings | None = None) -> list[str]:
    """Compila todas las plantillas y devuelve sus nombres.

    Lanza `jinja2.TemplateSyntaxError` si alguna no compila.
    """

    env = build_environment(settings)
    names = env.list_templates()
    for name in names:
        env.get_template(name)
    return names


def render_listing_html(*, page: ListingPage, settings: AppSettings | None = None) -> str:
    """Renderiza el listado completo (cabecera, filas y paginación)."""

    template = build_environment(settings).get_template(LISTING_TEMPLATE)
    return template.render(page=page)


def export_listing_html(
    *,
    page: ListingPage,
    output_path: Path,
    settings: AppSettings | None = None,
) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_listing_html(page=page, settings=settings)
    output_path.write_text(html, encoding="utf-8")
    return output_path
