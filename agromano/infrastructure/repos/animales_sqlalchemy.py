from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.animales import AnimalesRepository
from agromano.domain.models.animal import Animal
from agromano.infrastructure.db.orm.animal import AnimalORM
from agromano.infrastructure.repos.integrity import translate_integrity_error
from agromano.infrastructure.repos.paging import fetch_page, text_search

DUPLICATE_IDENTIFICACION = (
    "El número de identificación ya está en uso, "
    "no se pueden duplicar números de identificación"
)


class AnimalesSQLAlchemyRepository(AnimalesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            identificacion=orm.identificacion,
            especie=orm.especie,
            estado=orm.estado,
            fecha_nacimiento=orm.fecha_nacimiento,
            fecha_alta=orm.fecha_alta,
            id_explotacion=orm.id_explotacion,
        )

    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Animal], int]:
        stmt = select(AnimalORM).order_by(AnimalORM.id)
        if id_explotacion is not None:
            stmt = stmt.where(AnimalORM.id_explotacion == id_explotacion)
        if q:
            stmt = stmt.where(
                text_search(q, AnimalORM.identificacion, AnimalORM.especie, AnimalORM.estado)
            )
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def list_for_explotaciones(self, explotacion_ids: Sequence[int]) -> list[Animal]:
        if not explotacion_ids:
            return []
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.id_explotacion.in_(explotacion_ids))
            .order_by(AnimalORM.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get(self, animal_id: int) -> Animal | None:
        orm = await self.session.get(AnimalORM, animal_id)
        return self._to_domain(orm) if orm else None

    async def get_by_identificacion(self, identificacion: str) -> Animal | None:
        stmt = select(AnimalORM).where(AnimalORM.identificacion == identificacion)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            identificacion=animal.identificacion,
            especie=animal.especie,
            estado=animal.estado,
            fecha_nacimiento=animal.fecha_nacimiento,
            fecha_alta=animal.fecha_alta,
            id_explotacion=animal.id_explotacion,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_IDENTIFICACION) from exc
        return self._to_domain(orm)

    async def update(self, animal_id: int, data: dict) -> Animal | None:
        orm = await self.session.get(AnimalORM, animal_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_IDENTIFICACION) from exc
        return self._to_domain(orm)

    async def delete(self, animal_id: int) -> bool:
        result = await self.session.execute(delete(AnimalORM).where(AnimalORM.id == animal_id))
        return result.rowcount > 0
