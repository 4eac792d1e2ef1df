from __future__ import annotations

from typing import Protocol

from agromano.domain.models.titular import Titular


class TitularesRepository(Protocol):
    async def list(
        self,
        *,
        id_usuario: int | None = None,
        q: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Titular], int]: ...
    async def get(self, titular_id: int) -> Titular | None: ...
    async def get_by_nif(self, nif: str) -> Titular | None: ...
    async def get_usuario_id(self, titular_id: int) -> int | None: ...
    async def add(self, titular: Titular) -> Titular: ...
    async def update(self, titular_id: int, data: dict) -> Titular | None: ...
    async def delete(self, titular_id: int) -> bool: ...
