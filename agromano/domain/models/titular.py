from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Titular:
    id: int | None
    nombre: str
    nif: str
    id_usuario: int
    domicilio: str | None = None
    localidad: str | None = None
    provincia: str | None = None
    codigo_postal: str | None = None
    telefono: str | None = None
