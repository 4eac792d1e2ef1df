from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class MovimientoCreate(BaseModel):
    tipo: str = Field(min_length=1, max_length=32, description="Entrada o salida")
    fecha: date
    motivo: str | None = None
    procedencia_destino: str | None = None
    id_animal: int


class MovimientoUpdate(MovimientoCreate):
    pass


class MovimientoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    tipo: str
    fecha: date
    motivo: str | None
    procedencia_destino: str | None
    id_animal: int
