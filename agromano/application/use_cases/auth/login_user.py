from __future__ import annotations

from dataclasses import dataclass

from agromano.application.errors import AuthError
from agromano.application.interfaces.unit_of_work import UnitOfWork
from agromano.domain.models.sesion import Sesion
from agromano.domain.models.usuario import Usuario
from agromano.infrastructure.auth.password import PasswordHasher
from agromano.infrastructure.auth.session_tokens import SessionTokenService

INVALID_CREDENTIALS = "Email o contraseña incorrectos"


@dataclass(slots=True)
class LoginInput:
    email: str
    contrasena: str


@dataclass(slots=True)
class LoginResult:
    token: str
    usuario: Usuario
    sesion: Sesion


async def execute(
    *,
    uow: UnitOfWork,
    payload: LoginInput,
    password_hasher: PasswordHasher,
    session_tokens: SessionTokenService,
) -> LoginResult:
    usuario = await uow.usuarios.get_by_email(payload.email.lower())
    if not usuario:
        raise AuthError(INVALID_CREDENTIALS)
    if not password_hasher.verify(payload.contrasena, usuario.contrasena_hash):
        raise AuthError(INVALID_CREDENTIALS)

    sesion = Sesion.create(
        id_usuario=usuario.id, expires_in_minutes=session_tokens.expires_minutes
    )
    sesion = await uow.sesiones.add(sesion)
    await uow.commit()
    token = session_tokens.create_token(sesion_id=sesion.id, usuario_id=usuario.id)
    return LoginResult(token=token, usuario=usuario, sesion=sesion)
