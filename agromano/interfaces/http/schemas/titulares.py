from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TitularCreate(BaseModel):
    nombre: str = Field(min_length=1, max_length=255)
    nif: str = Field(min_length=1, max_length=32)
    domicilio: str | None = None
    localidad: str | None = None
    provincia: str | None = None
    codigo_postal: str | None = None
    telefono: str | None = None
    id_usuario: int | None = Field(
        default=None, description="Defaults to the logged-in usuario when omitted"
    )


class TitularUpdate(TitularCreate):
    pass


class TitularResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    nif: str
    domicilio: str | None
    localidad: str | None
    provincia: str | None
    codigo_postal: str | None
    telefono: str | None
    id_usuario: int


class TitularUsuarioResponse(BaseModel):
    id_usuario: int | None
