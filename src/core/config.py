"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que los adaptadores (plantillas, logging) lean config de forma
  consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "docs-listing"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "docs-listing"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "docs-listing"
    return Path.home() / ".config" / "docs-listing"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCS_LISTING_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    templates_dir: Path | None = Field(
        default=None,
        description="Directorio de plantillas Jinja2 alternativo al empaquetado.",
    )
    templates_auto_reload: bool = Field(
        default=False,
        description="Recargar plantillas modificadas en disco (desarrollo).",
    )
    site_version: str = Field(
        default="0.1.0",
        min_length=1,
        description="Versión del sitio mostrada en el pie de página.",
    )
    global_alert: str | None = Field(
        default=None,
        description="Aviso global opcional mostrado sobre el listado.",
    )
    rustc_resource_suffix: str | None = Field(
        default=None,
        description="Sufijo de recursos del rustc usado para los builds de docs.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING...).",
    )
