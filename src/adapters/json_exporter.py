"""Exportación JSON del listado.

Por qué JSON:
- Interoperabilidad con otros front-ends o una API que quiera las filas ya
  resueltas (href, etiqueta, metadato) sin pasar por HTML.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import ListingPage


def listing_to_payload(page: ListingPage) -> dict[str, Any]:
    payload = page.model_dump(mode="json")
    payload["pagination"]["links"] = page.pagination.links
    return payload


def dumps_listing(page: ListingPage) -> str:
    """Serializa `ListingPage` a JSON UTF-8 con formato estable."""

    return json.dumps(listing_to_payload(page), ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_listing_json(*, page: ListingPage, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_listing(page), encoding="utf-8")
    return output_path
