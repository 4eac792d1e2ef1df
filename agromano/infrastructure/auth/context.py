from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from agromano.domain.models.usuario import Usuario
from agromano.infrastructure.repos.sesiones_sqlalchemy import SesionesSQLAlchemyRepository
from agromano.infrastructure.repos.usuarios_sqlalchemy import UsuariosSQLAlchemyRepository


@dataclass(slots=True)
class AuthContext:
    usuario_id: int
    email: str
    nombre_usuario: str
    sesion_id: UUID


async def resolve_session(
    session: AsyncSession, sesion_id: UUID, usuario_id: int
) -> Usuario | None:
    """Load the usuario behind a live session row, or None if it was revoked or expired."""
    sesion = await SesionesSQLAlchemyRepository(session).get(sesion_id)
    if sesion is None or sesion.id_usuario != usuario_id or sesion.is_expired():
        return None
    return await UsuariosSQLAlchemyRepository(session).get(usuario_id)
