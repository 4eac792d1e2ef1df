from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class Medicamento:
    id: int | None
    fecha: date
    medicamento: str
    factura: str
    id_explotacion: int
    receta: str | None = None
