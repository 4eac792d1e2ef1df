from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.sesiones import SesionesRepository
from agromano.domain.models.sesion import Sesion
from agromano.infrastructure.db.orm.sesion import SesionORM


class SesionesSQLAlchemyRepository(SesionesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: SesionORM) -> Sesion:
        return Sesion(
            id=orm.id,
            id_usuario=orm.id_usuario,
            created_at=orm.created_at,
            expires_at=orm.expires_at,
        )

    async def add(self, sesion: Sesion) -> Sesion:
        orm = SesionORM(
            id=sesion.id,
            id_usuario=sesion.id_usuario,
            created_at=sesion.created_at,
            expires_at=sesion.expires_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, sesion_id: UUID) -> Sesion | None:
        orm = await self.session.get(SesionORM, sesion_id)
        return self._to_domain(orm) if orm else None

    async def delete(self, sesion_id: UUID) -> bool:
        result = await self.session.execute(delete(SesionORM).where(SesionORM.id == sesion_id))
        return result.rowcount > 0

    async def delete_for_usuario(self, usuario_id: int) -> int:
        result = await self.session.execute(
            delete(SesionORM).where(SesionORM.id_usuario == usuario_id)
        )
        return result.rowcount
