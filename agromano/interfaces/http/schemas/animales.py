from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class AnimalCreate(BaseModel):
    identificacion: str = Field(min_length=1, max_length=64)
    especie: str | None = None
    estado: str | None = None
    fecha_nacimiento: date | None = None
    fecha_alta: date | None = None
    id_explotacion: int


class AnimalUpdate(AnimalCreate):
    pass


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    identificacion: str
    especie: str | None
    estado: str | None
    fecha_nacimiento: date | None
    fecha_alta: date | None
    id_explotacion: int
