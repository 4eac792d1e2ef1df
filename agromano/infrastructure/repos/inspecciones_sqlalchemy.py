from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.inspecciones import InspeccionesRepository
from agromano.domain.models.inspeccion import Inspeccion
from agromano.infrastructure.db.orm.inspeccion import InspeccionORM
from agromano.infrastructure.repos.integrity import translate_integrity_error
from agromano.infrastructure.repos.paging import fetch_page, text_search

DUPLICATE_ACTA = "El número de acta ya está registrado para esta explotación."


class InspeccionesSQLAlchemyRepository(InspeccionesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: InspeccionORM) -> Inspeccion:
        return Inspeccion(
            id=orm.id,
            fecha=orm.fecha,
            oficial=orm.oficial,
            tipo=orm.tipo,
            numero_acta=orm.numero_acta,
            id_explotacion=orm.id_explotacion,
        )

    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Inspeccion], int]:
        stmt = select(InspeccionORM).order_by(InspeccionORM.fecha, InspeccionORM.id)
        if id_explotacion is not None:
            stmt = stmt.where(InspeccionORM.id_explotacion == id_explotacion)
        if q:
            stmt = stmt.where(text_search(q, InspeccionORM.tipo, InspeccionORM.numero_acta))
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def list_for_explotaciones(self, explotacion_ids: Sequence[int]) -> list[Inspeccion]:
        if not explotacion_ids:
            return []
        stmt = (
            select(InspeccionORM)
            .where(InspeccionORM.id_explotacion.in_(explotacion_ids))
            .order_by(InspeccionORM.fecha, InspeccionORM.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get(self, inspeccion_id: int) -> Inspeccion | None:
        orm = await self.session.get(InspeccionORM, inspeccion_id)
        return self._to_domain(orm) if orm else None

    async def get_by_acta(self, numero_acta: str, id_explotacion: int) -> Inspeccion | None:
        stmt = select(InspeccionORM).where(
            InspeccionORM.numero_acta == numero_acta,
            InspeccionORM.id_explotacion == id_explotacion,
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def add(self, inspeccion: Inspeccion) -> Inspeccion:
        orm = InspeccionORM(
            fecha=inspeccion.fecha,
            oficial=inspeccion.oficial,
            tipo=inspeccion.tipo,
            numero_acta=inspeccion.numero_acta,
            id_explotacion=inspeccion.id_explotacion,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_ACTA) from exc
        return self._to_domain(orm)

    async def update(self, inspeccion_id: int, data: dict) -> Inspeccion | None:
        orm = await self.session.get(InspeccionORM, inspeccion_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_ACTA) from exc
        return self._to_domain(orm)

    async def delete(self, inspeccion_id: int) -> bool:
        result = await self.session.execute(
            delete(InspeccionORM).where(InspeccionORM.id == inspeccion_id)
        )
        return result.rowcount > 0
