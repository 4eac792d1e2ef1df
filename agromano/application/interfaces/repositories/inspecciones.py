from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from agromano.domain.models.inspeccion import Inspeccion


class InspeccionesRepository(Protocol):
    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Inspeccion], int]: ...
    async def get(self, inspeccion_id: int) -> Inspeccion | None: ...
    async def add(self, inspeccion: Inspeccion) -> Inspeccion: ...
    async def update(self, inspeccion_id: int, data: dict) -> Inspeccion | None: ...
    async def delete(self, inspeccion_id: int) -> bool: ...
    async def get_by_acta(self, numero_acta: str, id_explotacion: int) -> Inspeccion | None: ...
    async def list_for_explotaciones(
        self, explotacion_ids: Sequence[int]
    ) -> list[Inspeccion]: ...
