from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class Vacunacion:
    id: int | None
    fecha: date
    tipo: str
    id_explotacion: int
    dosis: str | None = None
    nombre_comercial: str | None = None
    veterinario: str | None = None


@dataclass(slots=True)
class VacunacionAnimal:
    id: int | None
    id_vacunacion: int
    id_animal: int
