from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Parcela:
    id: int | None
    id_explotacion: int
    coordenadas: str | None = None
    extension: float | None = None
