from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from agromano.domain.models.medicamento import Medicamento


class MedicamentosRepository(Protocol):
    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Medicamento], int]: ...
    async def get(self, medicamento_id: int) -> Medicamento | None: ...
    async def add(self, medicamento: Medicamento) -> Medicamento: ...
    async def update(self, medicamento_id: int, data: dict) -> Medicamento | None: ...
    async def delete(self, medicamento_id: int) -> bool: ...
    async def get_by_factura(self, factura: str, id_explotacion: int) -> Medicamento | None: ...
    async def list_for_explotaciones(
        self, explotacion_ids: Sequence[int]
    ) -> list[Medicamento]: ...
