from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.explotaciones import ExplotacionesRepository
from agromano.domain.models.explotacion import Explotacion
from agromano.infrastructure.db.orm.explotacion import ExplotacionORM
from agromano.infrastructure.repos.integrity import translate_integrity_error
from agromano.infrastructure.repos.paging import fetch_page, text_search


class ExplotacionesSQLAlchemyRepository(ExplotacionesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ExplotacionORM) -> Explotacion:
        return Explotacion(
            id=orm.id,
            codigo=orm.codigo,
            nombre=orm.nombre,
            direccion=orm.direccion,
            localidad=orm.localidad,
            provincia=orm.provincia,
            codigo_postal=orm.codigo_postal,
            especies=orm.especies,
            coordenadas=orm.coordenadas,
            id_titular=orm.id_titular,
        )

    async def list(
        self,
        *,
        id_titular: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Explotacion], int]:
        stmt = select(ExplotacionORM).order_by(ExplotacionORM.id)
        if id_titular is not None:
            stmt = stmt.where(ExplotacionORM.id_titular == id_titular)
        if q:
            stmt = stmt.where(
                text_search(
                    q,
                    ExplotacionORM.nombre,
                    ExplotacionORM.codigo,
                    ExplotacionORM.localidad,
                    ExplotacionORM.especies,
                )
            )
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def list_for_titular(self, titular_id: int) -> list[Explotacion]:
        stmt = (
            select(ExplotacionORM)
            .where(ExplotacionORM.id_titular == titular_id)
            .order_by(ExplotacionORM.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get(self, explotacion_id: int) -> Explotacion | None:
        orm = await self.session.get(ExplotacionORM, explotacion_id)
        return self._to_domain(orm) if orm else None

    async def add(self, explotacion: Explotacion) -> Explotacion:
        orm = ExplotacionORM(
            codigo=explotacion.codigo,
            nombre=explotacion.nombre,
            direccion=explotacion.direccion,
            localidad=explotacion.localidad,
            provincia=explotacion.provincia,
            codigo_postal=explotacion.codigo_postal,
            especies=explotacion.especies,
            coordenadas=explotacion.coordenadas,
            id_titular=explotacion.id_titular,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def update(self, explotacion_id: int, data: dict) -> Explotacion | None:
        orm = await self.session.get(ExplotacionORM, explotacion_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def delete(self, explotacion_id: int) -> bool:
        result = await self.session.execute(
            delete(ExplotacionORM).where(ExplotacionORM.id == explotacion_id)
        )
        return result.rowcount > 0
