from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.alimentaciones import AlimentacionesRepository
from agromano.domain.models.alimentacion import Alimentacion
from agromano.infrastructure.db.orm.alimentacion import AlimentacionORM
from agromano.infrastructure.repos.integrity import translate_integrity_error
from agromano.infrastructure.repos.paging import fetch_page, text_search

DUPLICATE_FACTURA = "La factura ya está en uso, no se pueden duplicar facturas"


class AlimentacionesSQLAlchemyRepository(AlimentacionesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AlimentacionORM) -> Alimentacion:
        return Alimentacion(
            id=orm.id,
            fecha=orm.fecha,
            tipo=orm.tipo,
            cantidad=orm.cantidad,
            lote=orm.lote,
            factura=orm.factura,
            id_explotacion=orm.id_explotacion,
        )

    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Alimentacion], int]:
        stmt = select(AlimentacionORM).order_by(AlimentacionORM.fecha, AlimentacionORM.id)
        if id_explotacion is not None:
            stmt = stmt.where(AlimentacionORM.id_explotacion == id_explotacion)
        if q:
            stmt = stmt.where(
                text_search(q, AlimentacionORM.tipo, AlimentacionORM.lote, AlimentacionORM.factura)
            )
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def list_for_explotaciones(self, explotacion_ids: Sequence[int]) -> list[Alimentacion]:
        if not explotacion_ids:
            return []
        stmt = (
            select(AlimentacionORM)
            .where(AlimentacionORM.id_explotacion.in_(explotacion_ids))
            .order_by(AlimentacionORM.fecha, AlimentacionORM.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get(self, alimentacion_id: int) -> Alimentacion | None:
        orm = await self.session.get(AlimentacionORM, alimentacion_id)
        return self._to_domain(orm) if orm else None

    async def get_by_factura(self, factura: str, id_explotacion: int) -> Alimentacion | None:
        stmt = select(AlimentacionORM).where(
            AlimentacionORM.factura == factura,
            AlimentacionORM.id_explotacion == id_explotacion,
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def add(self, alimentacion: Alimentacion) -> Alimentacion:
        orm = AlimentacionORM(
            fecha=alimentacion.fecha,
            tipo=alimentacion.tipo,
            cantidad=alimentacion.cantidad,
            lote=alimentacion.lote,
            factura=alimentacion.factura,
            id_explotacion=alimentacion.id_explotacion,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_FACTURA) from exc
        return self._to_domain(orm)

    async def update(self, alimentacion_id: int, data: dict) -> Alimentacion | None:
        orm = await self.session.get(AlimentacionORM, alimentacion_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_FACTURA) from exc
        return self._to_domain(orm)

    async def delete(self, alimentacion_id: int) -> bool:
        result = await self.session.execute(
            delete(AlimentacionORM).where(AlimentacionORM.id == alimentacion_id)
        )
        return result.rowcount > 0
