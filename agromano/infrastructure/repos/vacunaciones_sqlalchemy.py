from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.vacunaciones import (
    VacunacionesAnimalRepository,
    VacunacionesRepository,
)
from agromano.domain.models.vacunacion import Vacunacion, VacunacionAnimal
from agromano.infrastructure.db.orm.vacunacion import VacunacionAnimalORM, VacunacionORM
from agromano.infrastructure.repos.integrity import translate_integrity_error
from agromano.infrastructure.repos.paging import fetch_page, text_search

DUPLICATE_VACUNACION = (
    "El tipo de vacuna ya existe para esa fecha. "
    "Accede a los animales afectados si quieres añadir animales a la vacuna."
)


class VacunacionesSQLAlchemyRepository(VacunacionesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: VacunacionORM) -> Vacunacion:
        return Vacunacion(
            id=orm.id,
            fecha=orm.fecha,
            tipo=orm.tipo,
            dosis=orm.dosis,
            nombre_comercial=orm.nombre_comercial,
            veterinario=orm.veterinario,
            id_explotacion=orm.id_explotacion,
        )

    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Vacunacion], int]:
        stmt = select(VacunacionORM).order_by(VacunacionORM.fecha, VacunacionORM.id)
        if id_explotacion is not None:
            stmt = stmt.where(VacunacionORM.id_explotacion == id_explotacion)
        if q:
            stmt = stmt.where(
                text_search(
                    q, VacunacionORM.tipo, VacunacionORM.nombre_comercial, VacunacionORM.veterinario
                )
            )
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def list_for_animales(
        self, animal_ids: Sequence[int]
    ) -> list[tuple[int, Vacunacion]]:
        """Vaccinations applied to each animal, paired with the animal id."""
        if not animal_ids:
            return []
        stmt = (
            select(VacunacionAnimalORM.id_animal, VacunacionORM)
            .join(VacunacionORM, VacunacionORM.id == VacunacionAnimalORM.id_vacunacion)
            .where(VacunacionAnimalORM.id_animal.in_(animal_ids))
            .order_by(VacunacionORM.fecha, VacunacionORM.id)
        )
        result = await self.session.execute(stmt)
        return [(id_animal, self._to_domain(orm)) for id_animal, orm in result.all()]

    async def get(self, vacunacion_id: int) -> Vacunacion | None:
        orm = await self.session.get(VacunacionORM, vacunacion_id)
        return self._to_domain(orm) if orm else None

    async def get_by_pareja(
        self, fecha: date, tipo: str, id_explotacion: int
    ) -> Vacunacion | None:
        stmt = select(VacunacionORM).where(
            VacunacionORM.fecha == fecha,
            VacunacionORM.tipo == tipo,
            VacunacionORM.id_explotacion == id_explotacion,
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def add(self, vacunacion: Vacunacion) -> Vacunacion:
        orm = VacunacionORM(
            fecha=vacunacion.fecha,
            tipo=vacunacion.tipo,
            dosis=vacunacion.dosis,
            nombre_comercial=vacunacion.nombre_comercial,
            veterinario=vacunacion.veterinario,
            id_explotacion=vacunacion.id_explotacion,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_VACUNACION) from exc
        return self._to_domain(orm)

    async def update(self, vacunacion_id: int, data: dict) -> Vacunacion | None:
        orm = await self.session.get(VacunacionORM, vacunacion_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_VACUNACION) from exc
        return self._to_domain(orm)

    async def delete(self, vacunacion_id: int) -> bool:
        result = await self.session.execute(
            delete(VacunacionORM).where(VacunacionORM.id == vacunacion_id)
        )
        return result.rowcount > 0


class VacunacionesAnimalSQLAlchemyRepository(VacunacionesAnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: VacunacionAnimalORM) -> VacunacionAnimal:
        return VacunacionAnimal(
            id=orm.id, id_vacunacion=orm.id_vacunacion, id_animal=orm.id_animal
        )

    async def list(
        self,
        *,
        id_vacunacion: int | None = None,
        id_animal: int | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[VacunacionAnimal], int]:
        stmt = select(VacunacionAnimalORM).order_by(VacunacionAnimalORM.id)
        if id_vacunacion is not None:
            stmt = stmt.where(VacunacionAnimalORM.id_vacunacion == id_vacunacion)
        if id_animal is not None:
            stmt = stmt.where(VacunacionAnimalORM.id_animal == id_animal)
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def get(self, link_id: int) -> VacunacionAnimal | None:
        orm = await self.session.get(VacunacionAnimalORM, link_id)
        return self._to_domain(orm) if orm else None

    async def add(self, link: VacunacionAnimal) -> VacunacionAnimal:
        orm = VacunacionAnimalORM(id_vacunacion=link.id_vacunacion, id_animal=link.id_animal)
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def update(self, link_id: int, data: dict) -> VacunacionAnimal | None:
        orm = await self.session.get(VacunacionAnimalORM, link_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
        return self._to_domain(orm)

    async def delete(self, link_id: int) -> bool:
        result = await self.session.execute(
            delete(VacunacionAnimalORM).where(VacunacionAnimalORM.id == link_id)
        )
        return result.rowcount > 0
