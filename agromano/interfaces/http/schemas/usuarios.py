from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UsuarioCreate(BaseModel):
    nombre_usuario: str = Field(min_length=1, max_length=255)
    nombre_empresa: str | None = None
    email: EmailStr
    contrasena: str = Field(min_length=1)


class UsuarioUpdate(BaseModel):
    nombre_usuario: str = Field(min_length=1, max_length=255)
    nombre_empresa: str | None = None
    email: EmailStr
    # Only re-hashed when provided
    contrasena: str | None = Field(default=None, min_length=1)


class UsuarioResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre_usuario: str
    nombre_empresa: str | None
    email: str
