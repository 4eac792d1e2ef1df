from __future__ import annotations

from typing import Protocol

from agromano.domain.models.usuario import Usuario


class UsuariosRepository(Protocol):
    async def list(self) -> list[Usuario]: ...
    async def get(self, usuario_id: int) -> Usuario | None: ...
    async def get_by_email(self, email: str) -> Usuario | None: ...
    async def add(self, usuario: Usuario) -> Usuario: ...
    async def update(self, usuario_id: int, data: dict) -> Usuario | None: ...
    async def delete(self, usuario_id: int) -> bool: ...
