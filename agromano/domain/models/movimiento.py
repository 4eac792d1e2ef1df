from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class Movimiento:
    id: int | None
    tipo: str
    fecha: date
    id_animal: int
    motivo: str | None = None
    procedencia_destino: str | None = None
