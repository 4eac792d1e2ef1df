from __future__ import annotations

from typing import Any

from agromano.application.interfaces.unit_of_work import UnitOfWork
from agromano.domain.models.usuario import Usuario
from agromano.infrastructure.auth.password import PasswordHasher


async def execute(
    *,
    uow: UnitOfWork,
    usuario_id: int,
    data: dict[str, Any],
    password_hasher: PasswordHasher,
) -> Usuario | None:
    changes = dict(data)
    contrasena = changes.pop("contrasena", None)
    if contrasena:
        changes["contrasena_hash"] = password_hasher.hash(contrasena)
    if changes.get("email"):
        changes["email"] = changes["email"].lower()
    updated = await uow.usuarios.update(usuario_id, changes)
    await uow.commit()
    return updated
