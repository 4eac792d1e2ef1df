from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Explotacion:
    id: int | None
    codigo: str  # REGA registration code
    nombre: str
    id_titular: int
    direccion: str | None = None
    localidad: str | None = None
    provincia: str | None = None
    codigo_postal: str | None = None
    especies: str | None = None
    coordenadas: str | None = None
