from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class Animal:
    id: int | None
    identificacion: str
    id_explotacion: int
    especie: str | None = None
    estado: str | None = None
    fecha_nacimiento: date | None = None
    fecha_alta: date | None = None
