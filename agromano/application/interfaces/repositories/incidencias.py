from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from agromano.domain.models.incidencia import Incidencia


class IncidenciasRepository(Protocol):
    async def list(
        self,
        *,
        id_animal: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Incidencia], int]: ...
    async def get(self, incidencia_id: int) -> Incidencia | None: ...
    async def add(self, incidencia: Incidencia) -> Incidencia: ...
    async def update(self, incidencia_id: int, data: dict) -> Incidencia | None: ...
    async def delete(self, incidencia_id: int) -> bool: ...
    async def list_for_animales(self, animal_ids: Sequence[int]) -> list[Incidencia]: ...
