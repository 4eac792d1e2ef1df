from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field

from agromano.interfaces.http.schemas.usuarios import UsuarioResponse


class LoginRequest(BaseModel):
    email: EmailStr
    contrasena: str


class RegisterRequest(BaseModel):
    nombre_usuario: str = Field(min_length=1, max_length=255)
    nombre_empresa: str | None = None
    email: EmailStr
    contrasena: str = Field(min_length=1)


class MessageResponse(BaseModel):
    message: str


class CheckAuthResponse(BaseModel):
    isAuthenticated: bool
    user: UsuarioResponse | None = None
