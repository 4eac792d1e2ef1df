from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from agromano.domain.models.parcela import Parcela


class ParcelasRepository(Protocol):
    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Parcela], int]: ...
    async def get(self, parcela_id: int) -> Parcela | None: ...
    async def add(self, parcela: Parcela) -> Parcela: ...
    async def update(self, parcela_id: int, data: dict) -> Parcela | None: ...
    async def delete(self, parcela_id: int) -> bool: ...
    async def list_for_explotaciones(self, explotacion_ids: Sequence[int]) -> list[Parcela]: ...
