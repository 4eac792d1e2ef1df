from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class AlimentacionCreate(BaseModel):
    fecha: date
    tipo: str = Field(min_length=1, max_length=128)
    cantidad: float | None = Field(default=None, ge=0, description="Kilogramos")
    lote: str | None = None
    factura: str = Field(min_length=1, max_length=64)
    id_explotacion: int


class AlimentacionUpdate(AlimentacionCreate):
    pass


class AlimentacionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    fecha: date
    tipo: str
    cantidad: float | None
    lote: str | None
    factura: str
    id_explotacion: int
