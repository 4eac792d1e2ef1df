from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from agromano.domain.models.animal import Animal


class AnimalesRepository(Protocol):
    async def list(
        self,
        *,
        id_explotacion: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Animal], int]: ...
    async def get(self, animal_id: int) -> Animal | None: ...
    async def add(self, animal: Animal) -> Animal: ...
    async def update(self, animal_id: int, data: dict) -> Animal | None: ...
    async def delete(self, animal_id: int) -> bool: ...
    async def get_by_identificacion(self, identificacion: str) -> Animal | None: ...
    async def list_for_explotaciones(self, explotacion_ids: Sequence[int]) -> list[Animal]: ...
