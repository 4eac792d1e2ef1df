from __future__ import annotations

from dataclasses import dataclass

from agromano.application.interfaces.unit_of_work import UnitOfWork
from agromano.domain.models.usuario import Usuario
from agromano.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class RegisterInput:
    nombre_usuario: str
    email: str
    contrasena: str
    nombre_empresa: str | None = None


async def execute(
    *, uow: UnitOfWork, payload: RegisterInput, password_hasher: PasswordHasher
) -> Usuario:
    # The unique index on email rejects duplicates on flush
    usuario = Usuario.create(
        nombre_usuario=payload.nombre_usuario,
        email=payload.email,
        contrasena_hash=password_hasher.hash(payload.contrasena),
        nombre_empresa=payload.nombre_empresa,
    )
    created = await uow.usuarios.add(usuario)
    await uow.commit()
    return created
