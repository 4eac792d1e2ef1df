from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class Inspeccion:
    id: int | None
    fecha: date
    numero_acta: str
    id_explotacion: int
    oficial: bool = False
    tipo: str | None = None
