from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class VacunacionCreate(BaseModel):
    fecha: date
    tipo: str = Field(min_length=1, max_length=128)
    dosis: str | None = None
    nombre_comercial: str | None = None
    veterinario: str | None = None
    id_explotacion: int


class VacunacionUpdate(VacunacionCreate):
    pass


class VacunacionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    fecha: date
    tipo: str
    dosis: str | None
    nombre_comercial: str | None
    veterinario: str | None
    id_explotacion: int


class VacunacionAnimalCreate(BaseModel):
    id_vacunacion: int
    id_animal: int


class VacunacionAnimalUpdate(VacunacionAnimalCreate):
    pass


class VacunacionAnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    id_vacunacion: int
    id_animal: int
