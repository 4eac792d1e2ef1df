from __future__ import annotations

from typing import Protocol

from agromano.domain.models.explotacion import Explotacion


class ExplotacionesRepository(Protocol):
    async def list(
        self,
        *,
        id_titular: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Explotacion], int]: ...
    async def get(self, explotacion_id: int) -> Explotacion | None: ...
    async def add(self, explotacion: Explotacion) -> Explotacion: ...
    async def update(self, explotacion_id: int, data: dict) -> Explotacion | None: ...
    async def delete(self, explotacion_id: int) -> bool: ...
    async def list_for_titular(self, titular_id: int) -> list[Explotacion]: ...
