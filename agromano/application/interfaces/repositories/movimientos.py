from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from agromano.domain.models.movimiento import Movimiento


class MovimientosRepository(Protocol):
    async def list(
        self,
        *,
        id_animal: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Movimiento], int]: ...
    async def get(self, movimiento_id: int) -> Movimiento | None: ...
    async def add(self, movimiento: Movimiento) -> Movimiento: ...
    async def update(self, movimiento_id: int, data: dict) -> Movimiento | None: ...
    async def delete(self, movimiento_id: int) -> bool: ...
    async def list_for_animales(self, animal_ids: Sequence[int]) -> list[Movimiento]: ...
