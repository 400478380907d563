"""Carga de releases desde JSON.

Soporta formatos tipo:
- Lista plana: [{"name": ..., "version": ...}, ...]
- Objeto:      {"releases": [...]}

Nota:
- No es la capa de datos del sitio; sirve para alimentar la CLI con una
  página ya recortada. El orden del fichero se respeta tal cual.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field

from core.domain.models import Release


class ReleasesFile(BaseModel):
    releases: list[Release] = Field(default_factory=list)


def parse_releases(data: object) -> list[Release]:
    if isinstance(data, list):
        data = {"releases": data}
    return ReleasesFile.model_validate(data).releases


def load_releases(path: Path) -> list[Release]:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    return parse_releases(data)
