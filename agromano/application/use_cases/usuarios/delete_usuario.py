from __future__ import annotations

from agromano.application.interfaces.unit_of_work import UnitOfWork


async def execute(*, uow: UnitOfWork, usuario_id: int, acting_usuario_id: int) -> bool:
    """Delete the row; returns True when the caller deleted their own account.

    Only the usuario's sessions are removed alongside it. Titulares and the
    rest of the tree are left to the schema's ON DELETE rules.
    """
    own_account = usuario_id == acting_usuario_id
    if own_account:
        await uow.sesiones.delete_for_usuario(usuario_id)
    await uow.usuarios.delete(usuario_id)
    await uow.commit()
    return own_account
