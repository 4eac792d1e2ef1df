from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict


class IncidenciaCreate(BaseModel):
    fecha: date
    descripcion: str | None = None
    codigo_anterior: str | None = None
    codigo_actual: str | None = None
    id_animal: int


class IncidenciaUpdate(IncidenciaCreate):
    pass


class IncidenciaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    fecha: date
    descripcion: str | None
    codigo_anterior: str | None
    codigo_actual: str | None
    id_animal: int
