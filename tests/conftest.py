from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from agromano.config.settings import Settings
from agromano.infrastructure.db.base import Base
from agromano.infrastructure.db.orm import (  # noqa: F401
    alimentacion,
    animal,
    explotacion,
    incidencia,
    inspeccion,
    medicamento,
    movimiento,
    parcela,
    sesion,
    titular,
    usuario,
    vacunacion,
)
from agromano.interfaces.http.main import create_app
from tests.support import register_and_login


class StubChatbot:
    def __init__(self, answer: str = "Ve a Titulares y pulsa Crear.", fail: bool = False) -> None:
        self.answer = answer
        self.fail = fail
        self.messages: list[str] = []

    async def reply(self, message: str) -> str:
        self.messages.append(message)
        if self.fail:
            raise RuntimeError("provider down")
        return self.answer


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "session_secret_key": "test-session-secret",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def chatbot() -> StubChatbot:
    return StubChatbot()


@pytest.fixture()
def app(test_settings: Settings, chatbot: StubChatbot):
    return create_app(settings=test_settings, chatbot_service=chatbot)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
async def logged_in(client: AsyncClient) -> dict:
    return await register_and_login(client)


@pytest.fixture()
async def titular(client: AsyncClient, logged_in: dict) -> dict:
    created = await client.post("/api/titulares", json={"nombre": "Ana Pérez", "nif": "12345678Z"})
    assert created.status_code == 201, created.text
    return created.json()


@pytest.fixture()
async def explotacion(client: AsyncClient, titular: dict) -> dict:
    created = await client.post(
        "/api/explotaciones",
        json={"codigo": "ES100000000001", "nombre": "La Dehesa", "id_titular": titular["id"]},
    )
    assert created.status_code == 201, created.text
    return created.json()
