from __future__ import annotations

from httpx import AsyncClient

PASSWORD = "secreto123"


async def register_and_login(
    client: AsyncClient, email: str = "ganadero@example.com", password: str = PASSWORD
) -> dict:
    register = await client.post(
        "/api/register",
        json={
            "nombre_usuario": "Ganadero",
            "nombre_empresa": "Granja Norte",
            "email": email,
            "contrasena": password,
        },
    )
    assert register.status_code == 201, register.text
    login = await client.post("/api/login", json={"email": email, "contrasena": password})
    assert login.status_code == 200, login.text
    return register.json()
