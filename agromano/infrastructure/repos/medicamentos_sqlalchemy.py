from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.medicamentos import MedicamentosRepository
from agromano.domain.models.medicamento import Medicamento
from agromano.infrastructure.db.orm.medicamento import MedicamentoORM
from agromano.infrastructure.repos.integrity import translate_integrity_error
from agromano.infrastructure.repos.paging import fetch_page, text_search

DUPLICATE_FACTURA = "La factura ya está en uso, no se pueden duplicar facturas"


class MedicamentosSQLAlchemyRepository(MedicamentosRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MedicamentoORM) -> Medicamento:
        return Medicamento(
            id=orm.id,
            fecha=orm.fecha,
            receta=orm.receta,
            medicamento=orm.medicamento,
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
    ) -> tuple[list[Medicamento], int]:
        stmt = select(MedicamentoORM).order_by(MedicamentoORM.fecha, MedicamentoORM.id)
        if id_explotacion is not None:
            stmt = stmt.where(MedicamentoORM.id_explotacion == id_explotacion)
        if q:
            stmt = stmt.where(
                text_search(
                    q, MedicamentoORM.medicamento, MedicamentoORM.receta, MedicamentoORM.factura
                )
            )
        rows, total = await fetch_page(self.session, stmt, limit=limit, offset=offset)
        return [self._to_domain(r) for r in rows], total

    async def list_for_explotaciones(self, explotacion_ids: Sequence[int]) -> list[Medicamento]:
        if not explotacion_ids:
            return []
        stmt = (
            select(MedicamentoORM)
            .where(MedicamentoORM.id_explotacion.in_(explotacion_ids))
            .order_by(MedicamentoORM.fecha, MedicamentoORM.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get(self, medicamento_id: int) -> Medicamento | None:
        orm = await self.session.get(MedicamentoORM, medicamento_id)
        return self._to_domain(orm) if orm else None

    async def get_by_factura(self, factura: str, id_explotacion: int) -> Medicamento | None:
        stmt = select(MedicamentoORM).where(
            MedicamentoORM.factura == factura,
            MedicamentoORM.id_explotacion == id_explotacion,
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def add(self, medicamento: Medicamento) -> Medicamento:
        orm = MedicamentoORM(
            fecha=medicamento.fecha,
            receta=medicamento.receta,
            medicamento=medicamento.medicamento,
            factura=medicamento.factura,
            id_explotacion=medicamento.id_explotacion,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_FACTURA) from exc
        return self._to_domain(orm)

    async def update(self, medicamento_id: int, data: dict) -> Medicamento | None:
        orm = await self.session.get(MedicamentoORM, medicamento_id)
        if orm is None:
            return None
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_FACTURA) from exc
        return self._to_domain(orm)

    async def delete(self, medicamento_id: int) -> bool:
        result = await self.session.execute(
            delete(MedicamentoORM).where(MedicamentoORM.id == medicamento_id)
        )
        return result.rowcount > 0
