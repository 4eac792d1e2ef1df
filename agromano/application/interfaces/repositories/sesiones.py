from __future__ import annotations

from typing import Protocol
from uuid import UUID

from agromano.domain.models.sesion import Sesion


class SesionesRepository(Protocol):
    async def add(self, sesion: Sesion) -> Sesion: ...
    async def get(self, sesion_id: UUID) -> Sesion | None: ...
    async def delete(self, sesion_id: UUID) -> bool: ...
    async def delete_for_usuario(self, usuario_id: int) -> int: ...
