from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.parcelas import ParcelasRepository
from agromano.domain.models.parcela import Parcela
from agromano.infrastructure.db.orm.parcela import ParcelaORM
from agromano.infrastructure.repos.integrity import translate_integrity_error
from agromano.infrastructure.repos.paging import fetch_page, text_search


class ParcelasSQLAlchemyRepository(ParcelasRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ParcelaORM) -> Parcela:
        return Parcela(
            id=orm.id,
            coordenadas=orm.coordenadas,
            extension=orm.extension,
            id_explotacion=orm.id_explotacion,
        )

    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Parcela], int]:
        stmt = select(ParcelaORM).order_by(ParcelaORM.id)
        if id_explotacion is not None:
            stmt = stmt.where(ParcelaORM.id_explotacion == id_explotacion)
        if q:
            stmt = stmt.where(text_search(q, ParcelaORM.coordenadas))
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def list_for_explotaciones(self, explotacion_ids: Sequence[int]) -> list[Parcela]:
        if not explotacion_ids:
            return []
        stmt = (
            select(ParcelaORM)
            .where(ParcelaORM.id_explotacion.in_(explotacion_ids))
            .order_by(ParcelaORM.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get(self, parcela_id: int) -> Parcela | None:
        orm = await self.session.get(ParcelaORM, parcela_id)
        return self._to_domain(orm) if orm else None

    async def add(self, parcela: Parcela) -> Parcela:
        orm = ParcelaORM(
            coordenadas=parcela.coordenadas,
            extension=parcela.extension,
            id_explotacion=parcela.id_explotacion,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def update(self, parcela_id: int, data: dict) -> Parcela | None:
        orm = await self.session.get(ParcelaORM, parcela_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def delete(self, parcela_id: int) -> bool:
        result = await self.session.execute(delete(ParcelaORM).where(ParcelaORM.id == parcela_id))
        return result.rowcount > 0
