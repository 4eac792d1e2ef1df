from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExplotacionCreate(BaseModel):
    codigo: str = Field(min_length=1, max_length=64, description="Código REGA")
    nombre: str = Field(min_length=1, max_length=255)
    direccion: str | None = None
    localidad: str | None = None
    provincia: str | None = None
    codigo_postal: str | None = None
    especies: str | None = None
    coordenadas: str | None = None
    id_titular: int


class ExplotacionUpdate(ExplotacionCreate):
    pass


class ExplotacionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    codigo: str
    nombre: str
    direccion: str | None
    localidad: str | None
    provincia: str | None
    codigo_postal: str | None
    especies: str | None
    coordenadas: str | None
    id_titular: int
