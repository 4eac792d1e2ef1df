from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ParcelaCreate(BaseModel):
    coordenadas: str | None = None
    extension: float | None = Field(default=None, ge=0, description="Hectáreas")
    id_explotacion: int


class ParcelaUpdate(ParcelaCreate):
    pass


class ParcelaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    coordenadas: str | None
    extension: float | None
    id_explotacion: int
