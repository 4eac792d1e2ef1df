from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.titulares import TitularesRepository
from agromano.domain.models.titular import Titular
from agromano.infrastructure.db.orm.titular import TitularORM
from agromano.infrastructure.repos.integrity import translate_integrity_error
from agromano.infrastructure.repos.paging import fetch_page, text_search

DUPLICATE_NIF = "El NIF ya está en uso"


class TitularesSQLAlchemyRepository(TitularesRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: TitularORM) -> Titular:
        return Titular(
            id=orm.id,
            nombre=orm.nombre,
            nif=orm.nif,
            domicilio=orm.domicilio,
            localidad=orm.localidad,
            provincia=orm.provincia,
            codigo_postal=orm.codigo_postal,
            telefono=orm.telefono,
            id_usuario=orm.id_usuario,
        )

    async def list(
        self,
        *,
        id_usuario: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Titular], int]:
        stmt = select(TitularORM).order_by(TitularORM.id)
        if id_usuario is not None:
            stmt = stmt.where(TitularORM.id_usuario == id_usuario)
        if q:
            stmt = stmt.where(
                text_search(q, TitularORM.nombre, TitularORM.nif, TitularORM.localidad)
            )
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def get(self, titular_id: int) -> Titular | None:
        orm = await self.session.get(TitularORM, titular_id)
        return self._to_domain(orm) if orm else None

    async def get_by_nif(self, nif: str) -> Titular | None:
        result = await self.session.execute(select(TitularORM).where(TitularORM.nif == nif))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_usuario_id(self, titular_id: int) -> int | None:
        stmt = select(TitularORM.id_usuario).where(TitularORM.id == titular_id)
        return await self.session.scalar(stmt)

    async def add(self, titular: Titular) -> Titular:
        orm = TitularORM(
            nombre=titular.nombre,
            nif=titular.nif,
            domicilio=titular.domicilio,
            localidad=titular.localidad,
            provincia=titular.provincia,
            codigo_postal=titular.codigo_postal,
            telefono=titular.telefono,
            id_usuario=titular.id_usuario,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_NIF) from exc
        return self._to_domain(orm)

    async def update(self, titular_id: int, data: dict) -> Titular | None:
        orm = await self.session.get(TitularORM, titular_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_NIF) from exc
        return self._to_domain(orm)

    async def delete(self, titular_id: int) -> bool:
        # Children are left to the schema's ON DELETE rule
        result = await self.session.execute(delete(TitularORM).where(TitularORM.id == titular_id))
        return result.rowcount > 0
