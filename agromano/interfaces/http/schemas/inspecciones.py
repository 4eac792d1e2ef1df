from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class InspeccionCreate(BaseModel):
    fecha: date
    oficial: bool = False
    tipo: str | None = None
    numero_acta: str = Field(min_length=1, max_length=64)
    id_explotacion: int


class InspeccionUpdate(InspeccionCreate):
    pass


class InspeccionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    fecha: date
    oficial: bool
    tipo: str | None
    numero_acta: str
    id_explotacion: int
