from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.movimientos import MovimientosRepository
from agromano.domain.models.movimiento import Movimiento
from agromano.infrastructure.db.orm.movimiento import MovimientoORM
from agromano.infrastructure.repos.integrity import translate_integrity_error
from agromano.infrastructure.repos.paging import fetch_page, text_search


class MovimientosSQLAlchemyRepository(MovimientosRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MovimientoORM) -> Movimiento:
        return Movimiento(
            id=orm.id,
            tipo=orm.tipo,
            fecha=orm.fecha,
            motivo=orm.motivo,
            procedencia_destino=orm.procedencia_destino,
            id_animal=orm.id_animal,
        )

    async def list(
        self,
        *,
        id_animal: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Movimiento], int]:
        stmt = select(MovimientoORM).order_by(MovimientoORM.fecha, MovimientoORM.id)
        if id_animal is not None:
            stmt = stmt.where(MovimientoORM.id_animal == id_animal)
        if q:
            stmt = stmt.where(
                text_search(
                    q, MovimientoORM.tipo, MovimientoORM.motivo, MovimientoORM.procedencia_destino
                )
            )
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def list_for_animales(self, animal_ids: Sequence[int]) -> list[Movimiento]:
        if not animal_ids:
            return []
        stmt = (
            select(MovimientoORM)
            .where(MovimientoORM.id_animal.in_(animal_ids))
            .order_by(MovimientoORM.fecha, MovimientoORM.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get(self, movimiento_id: int) -> Movimiento | None:
        orm = await self.session.get(MovimientoORM, movimiento_id)
        return self._to_domain(orm) if orm else None

    async def add(self, movimiento: Movimiento) -> Movimiento:
        orm = MovimientoORM(
            tipo=movimiento.tipo,
            fecha=movimiento.fecha,
            motivo=movimiento.motivo,
            procedencia_destino=movimiento.procedencia_destino,
            id_animal=movimiento.id_animal,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def update(self, movimiento_id: int, data: dict) -> Movimiento | None:
        orm = await self.session.get(MovimientoORM, movimiento_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def delete(self, movimiento_id: int) -> bool:
        result = await self.session.execute(
            delete(MovimientoORM).where(MovimientoORM.id == movimiento_id)
        )
        return result.rowcount > 0
