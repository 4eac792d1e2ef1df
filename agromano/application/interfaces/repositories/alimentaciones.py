from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from agromano.domain.models.alimentacion import Alimentacion


class AlimentacionesRepository(Protocol):
    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Alimentacion], int]: ...
    async def get(self, alimentacion_id: int) -> Alimentacion | None: ...
    async def add(self, alimentacion: Alimentacion) -> Alimentacion: ...
    async def update(self, alimentacion_id: int, data: dict) -> Alimentacion | None: ...
    async def delete(self, alimentacion_id: int) -> bool: ...
    async def get_by_factura(self, factura: str, id_explotacion: int) -> Alimentacion | None: ...
    async def list_for_explotaciones(
        self, explotacion_ids: Sequence[int]
    ) -> list[Alimentacion]: ...
