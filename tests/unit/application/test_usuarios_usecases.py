from __future__ import annotations

from types import SimpleNamespace

import pytest

from agromano.application.errors import AuthError
from agromano.application.use_cases.auth import login_user
from agromano.application.use_cases.usuarios import delete_usuario, update_usuario
from agromano.domain.models.usuario import Usuario
from agromano.infrastructure.auth.session_tokens import SessionTokenService


class StubHasher:
    def hash(self, contrasena: str) -> str:
        return f"hashed:{contrasena}"

    def verify(self, contrasena: str, contrasena_hash: str) -> bool:
        return contrasena_hash == f"hashed:{contrasena}"


class StubUsuarios:
    def __init__(self) -> None:
        self.update_input = None
        self.deleted = []
        self.stored = Usuario(
            id=5, nombre_usuario="ana", email="ana@example.com", contrasena_hash="hashed:clave"
        )

    async def get_by_email(self, email):
        return self.stored if email == self.stored.email else None

    async def update(self, usuario_id, data):
        self.update_input = data
        return self.stored

    async def delete(self, usuario_id):
        self.deleted.append(usuario_id)
        return True


class StubSesiones:
    def __init__(self) -> None:
        self.added = []
        self.cleared = []

    async def add(self, sesion):
        self.added.append(sesion)
        return sesion

    async def delete_for_usuario(self, usuario_id):
        self.cleared.append(usuario_id)


def make_uow():
    commits = []

    async def commit():
        commits.append(True)

    return SimpleNamespace(
        usuarios=StubUsuarios(), sesiones=StubSesiones(), commit=commit, commits=commits
    )


@pytest.mark.asyncio
async def test_update_hashes_new_password_and_lowercases_email():
    uow = make_uow()
    await update_usuario.execute(
        uow=uow,
        usuario_id=5,
        data={"email": "Ana@Example.COM", "contrasena": "nueva"},
        password_hasher=StubHasher(),
    )
    assert uow.usuarios.update_input == {
        "email": "ana@example.com",
        "contrasena_hash": "hashed:nueva",
    }
    assert uow.commits


@pytest.mark.asyncio
async def test_update_without_password_keeps_hash_untouched():
    uow = make_uow()
    await update_usuario.execute(
        uow=uow,
        usuario_id=5,
        data={"nombre_empresa": "Granja", "contrasena": None},
        password_hasher=StubHasher(),
    )
    assert uow.usuarios.update_input == {"nombre_empresa": "Granja"}


@pytest.mark.asyncio
async def test_deleting_other_account_keeps_caller_sessions():
    uow = make_uow()
    own = await delete_usuario.execute(uow=uow, usuario_id=9, acting_usuario_id=5)
    assert own is False
    assert uow.sesiones.cleared == []
    assert uow.usuarios.deleted == [9]


@pytest.mark.asyncio
async def test_deleting_own_account_clears_sessions():
    uow = make_uow()
    own = await delete_usuario.execute(uow=uow, usuario_id=5, acting_usuario_id=5)
    assert own is True
    assert uow.sesiones.cleared == [5]


@pytest.mark.asyncio
async def test_login_rejects_wrong_password_without_creating_session():
    uow = make_uow()
    tokens = SessionTokenService(secret_key="k", algorithm="HS256", expires_minutes=5)
    with pytest.raises(AuthError):
        await login_user.execute(
            uow=uow,
            payload=login_user.LoginInput(email="ana@example.com", contrasena="mala"),
            password_hasher=StubHasher(),
            session_tokens=tokens,
        )
    assert uow.sesiones.added == []


@pytest.mark.asyncio
async def test_login_matches_email_case_insensitively():
    uow = make_uow()
    tokens = SessionTokenService(secret_key="k", algorithm="HS256", expires_minutes=5)
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email="ANA@example.com", contrasena="clave"),
        password_hasher=StubHasher(),
        session_tokens=tokens,
    )
    assert result.usuario.id == 5
    assert tokens.decode(result.token) == (result.sesion.id, 5)
