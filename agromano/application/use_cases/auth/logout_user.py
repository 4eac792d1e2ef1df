from __future__ import annotations

from uuid import UUID

from agromano.application.interfaces.unit_of_work import UnitOfWork


async def execute(*, uow: UnitOfWork, sesion_id: UUID | None) -> bool:
    """Revoke the session row; logging out without a session is a no-op."""
    if sesion_id is None:
        return False
    removed = await uow.sesiones.delete(sesion_id)
    await uow.commit()
    return removed
