from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class Alimentacion:
    id: int | None
    fecha: date
    tipo: str
    factura: str
    id_explotacion: int
    cantidad: float | None = None
    lote: str | None = None
