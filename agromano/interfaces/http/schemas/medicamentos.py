from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class MedicamentoCreate(BaseModel):
    fecha: date
    receta: str | None = None
    medicamento: str = Field(min_length=1, max_length=255)
    factura: str = Field(min_length=1, max_length=64)
    id_explotacion: int


class MedicamentoUpdate(MedicamentoCreate):
    pass


class MedicamentoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    fecha: date
    receta: str | None
    medicamento: str
    factura: str
    id_explotacion: int
