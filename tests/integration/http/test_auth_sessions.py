from __future__ import annotations

import pytest

from tests.support import PASSWORD, register_and_login

COOKIE = "agromano_session"


@pytest.mark.asyncio
async def test_register_hides_password_hash(client):
    response = await client.post(
        "/api/register",
        json={
            "nombre_usuario": "Luis",
            "email": "Luis@Example.com",
            "contrasena": PASSWORD,
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "luis@example.com"
    assert "contrasena" not in data
    assert "contrasena_hash" not in data


@pytest.mark.asyncio
async def test_register_duplicate_email_rejected(client):
    await register_and_login(client)
    client.cookies.clear()
    response = await client.post(
        "/api/register",
        json={"nombre_usuario": "Otro", "email": "ganadero@example.com", "contrasena": "x1"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "El correo electrónico ya está en uso"


@pytest.mark.asyncio
async def test_login_sets_session_cookie(client):
    await register_and_login(client)
    assert client.cookies.get(COOKIE)

    check = await client.get("/api/check-auth")
    assert check.status_code == 200
    body = check.json()
    assert body["isAuthenticated"] is True
    assert body["user"]["email"] == "ganadero@example.com"


@pytest.mark.asyncio
async def test_login_wrong_password_gives_401_without_cookie(client):
    await register_and_login(client)
    client.cookies.clear()

    response = await client.post(
        "/api/login", json={"email": "ganadero@example.com", "contrasena": "incorrecta"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Email o contraseña incorrectos"
    assert COOKIE not in response.cookies
    assert client.cookies.get(COOKIE) is None


@pytest.mark.asyncio
async def test_login_unknown_email_gives_401(client):
    response = await client.post(
        "/api/login", json={"email": "nadie@example.com", "contrasena": PASSWORD}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_protected_routes_require_session(client):
    for path in ("/api/titulares", "/api/animales", "/api/usuarios", "/api/explotaciones/1"):
        response = await client.get(path)
        assert response.status_code == 401, path
        assert response.json()["code"] == "auth_error"


@pytest.mark.asyncio
async def test_public_routes_without_session(client):
    health = await client.get("/api/health")
    assert health.status_code == 200
    assert health.json() == {"status": "ok"}

    check = await client.get("/api/check-auth")
    assert check.status_code == 200
    assert check.json() == {"isAuthenticated": False, "user": None}


@pytest.mark.asyncio
async def test_logout_revokes_session(client):
    await register_and_login(client)
    token = client.cookies.get(COOKIE)
    assert (await client.get("/api/titulares")).status_code == 200

    logout = await client.post("/api/logout")
    assert logout.status_code == 200
    assert logout.json() == {"message": "Logout exitoso"}

    # Replaying the old cookie must fail because the session row is gone
    client.cookies.clear()
    client.cookies.set(COOKIE, token)
    response = await client.get("/api/titulares")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_tampered_cookie_is_rejected(client):
    await register_and_login(client)
    client.cookies.clear()
    client.cookies.set(COOKIE, "not-a-valid-token")
    response = await client.get("/api/titulares")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_update_usuario_rehashes_only_when_password_given(client, logged_in):
    usuario_id = logged_in["id"]
    renamed = await client.put(
        f"/api/usuarios/{usuario_id}",
        json={"nombre_usuario": "Ganadera", "email": "ganadero@example.com"},
    )
    assert renamed.status_code == 200
    assert renamed.json()["nombre_usuario"] == "Ganadera"

    client.cookies.clear()
    login = await client.post(
        "/api/login", json={"email": "ganadero@example.com", "contrasena": PASSWORD}
    )
    assert login.status_code == 200

    changed = await client.put(
        f"/api/usuarios/{usuario_id}",
        json={"nombre_usuario": "Ganadera", "email": "ganadero@example.com", "contrasena": "nueva1"},
    )
    assert changed.status_code == 200

    client.cookies.clear()
    old = await client.post(
        "/api/login", json={"email": "ganadero@example.com", "contrasena": PASSWORD}
    )
    assert old.status_code == 401
    new = await client.post(
        "/api/login", json={"email": "ganadero@example.com", "contrasena": "nueva1"}
    )
    assert new.status_code == 200


@pytest.mark.asyncio
async def test_deleting_own_usuario_ends_session(client, logged_in):
    token = client.cookies.get(COOKIE)
    response = await client.delete(f"/api/usuarios/{logged_in['id']}")
    assert response.status_code == 204

    client.cookies.clear()
    client.cookies.set(COOKIE, token)
    check = await client.get("/api/check-auth")
    assert check.json()["isAuthenticated"] is False
