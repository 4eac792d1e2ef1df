from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agromano.application.interfaces.repositories.usuarios import UsuariosRepository
from agromano.domain.models.usuario import Usuario
from agromano.infrastructure.db.orm.usuario import UsuarioORM
from agromano.infrastructure.repos.integrity import translate_integrity_error

DUPLICATE_EMAIL = "El correo electrónico ya está en uso"


class UsuariosSQLAlchemyRepository(UsuariosRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: UsuarioORM) -> Usuario:
        return Usuario(
            id=orm.id,
            nombre_usuario=orm.nombre_usuario,
            nombre_empresa=orm.nombre_empresa,
            email=orm.email,
            contrasena_hash=orm.contrasena_hash,
        )

    async def list(self) -> list[Usuario]:
        result = await self.session.execute(select(UsuarioORM).order_by(UsuarioORM.id))
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get(self, usuario_id: int) -> Usuario | None:
        orm = await self.session.get(UsuarioORM, usuario_id)
        return self._to_domain(orm) if orm else None

    async def get_by_email(self, email: str) -> Usuario | None:
        stmt = select(UsuarioORM).where(UsuarioORM.email == email.lower())
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def add(self, usuario: Usuario) -> Usuario:
        orm = UsuarioORM(
            nombre_usuario=usuario.nombre_usuario,
            nombre_empresa=usuario.nombre_empresa,
            email=usuario.email.lower(),
            contrasena_hash=usuario.contrasena_hash,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_EMAIL) from exc
        return self._to_domain(orm)

    async def update(self, usuario_id: int, data: dict) -> Usuario | None:
        orm = await self.session.get(UsuarioORM, usuario_id)
        if orm is None:
            return None
        if "email" in data:
            data = {**data, "email": data["email"].lower()}
        for key, value in data.items():
            setattr(orm, key, value)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, DUPLICATE_EMAIL) from exc
        return self._to_domain(orm)

    async def delete(self, usuario_id: int) -> bool:
        result = await self.session.execute(delete(UsuarioORM).where(UsuarioORM.id == usuario_id))
        return result.rowcount > 0
