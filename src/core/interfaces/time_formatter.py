"""Contrato de formateo de tiempos.

Por qué Protocol:
- El renderer necesita "hace 3 días" y un instante absoluto, pero no debe
  leer el reloj ni decidir el formato por su cuenta.
- Los tests inyectan un formatter o un `now` fijo sin herencia rígida.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class TimeFormatter(Protocol):
    """Capacidad mínima de formateo usada por el listado."""

    def relative(self, value: datetime, now: datetime) -> str:
        """Texto humano relativo a `now` (p.ej. '2 hours ago')."""

        ...

    def absolute(self, value: datetime) -> str:
        """Instante legible por máquina (UTC, `YYYY-MM-DDTHH:MM:SSZ`)."""

        ...
