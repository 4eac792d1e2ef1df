from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class Incidencia:
    id: int | None
    fecha: date
    id_animal: int
    descripcion: str | None = None
    codigo_anterior: str | None = None
    codigo_actual: str | None = None
