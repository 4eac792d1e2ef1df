from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.incidencias import IncidenciasRepository
from agromano.domain.models.incidencia import Incidencia
from agromano.infrastructure.db.orm.incidencia import IncidenciaORM
from agromano.infrastructure.repos.integrity import translate_integrity_error
from agromano.infrastructure.repos.paging import fetch_page, text_search


class IncidenciasSQLAlchemyRepository(IncidenciasRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: IncidenciaORM) -> Incidencia:
        return Incidencia(
            id=orm.id,
            fecha=orm.fecha,
            descripcion=orm.descripcion,
            codigo_anterior=orm.codigo_anterior,
            codigo_actual=orm.codigo_actual,
            id_animal=orm.id_animal,
        )

    async def list(
        self,
        *,
        id_animal: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Incidencia], int]:
        stmt = select(IncidenciaORM).order_by(IncidenciaORM.fecha, IncidenciaORM.id)
        if id_animal is not None:
            stmt = stmt.where(IncidenciaORM.id_animal == id_animal)
        if q:
            stmt = stmt.where(
                text_search(
                    q,
                    IncidenciaORM.descripcion,
                    IncidenciaORM.codigo_anterior,
                    IncidenciaORM.codigo_actual,
                )
            )
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def list_for_animales(self, animal_ids: Sequence[int]) -> list[Incidencia]:
        if not animal_ids:
            return []
        stmt = (
            select(IncidenciaORM)
            .where(IncidenciaORM.id_animal.in_(animal_ids))
            .order_by(IncidenciaORM.fecha, IncidenciaORM.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get(self, incidencia_id: int) -> Incidencia | None:
        orm = await self.session.get(IncidenciaORM, incidencia_id)
        return self._to_domain(orm) if orm else None

    async def add(self, incidencia: Incidencia) -> Incidencia:
        orm = IncidenciaORM(
            fecha=incidencia.fecha,
            descripcion=incidencia.descripcion,
            codigo_anterior=incidencia.codigo_anterior,
            codigo_actual=incidencia.codigo_actual,
            id_animal=incidencia.id_animal,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def update(self, incidencia_id: int, data: dict) -> Incidencia | None:
        orm = await self.session.get(IncidenciaORM, incidencia_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def delete(self, incidencia_id: int) -> bool:
        result = await self.session.execute(
            delete(IncidenciaORM).where(IncidenciaORM.id == incidencia_id)
        )
        return result.rowcount > 0
