from __future__ import annotations

import pytest

from agromano.interfaces.http.main import create_app


@pytest.mark.asyncio
async def test_chatbot_answers_with_provider_text(client, logged_in, chatbot):
    response = await client.post("/api/chatbot", json={"message": "¿Cómo creo un titular?"})
    assert response.status_code == 200
    assert response.json() == {"response": chatbot.answer}
    assert chatbot.messages == ["¿Cómo creo un titular?"]


@pytest.mark.asyncio
async def test_chatbot_provider_failure_is_500(client, logged_in, chatbot):
    chatbot.fail = True
    response = await client.post("/api/chatbot", json={"message": "hola"})
    assert response.status_code == 500
    assert response.json()["message"] == "Error al generar la respuesta del chatbot"


@pytest.mark.asyncio
async def test_chatbot_requires_session(client):
    response = await client.post("/api/chatbot", json={"message": "hola"})
    assert response.status_code == 401


def test_chatbot_without_api_key_is_not_configured(test_settings):
    app = create_app(settings=test_settings)
    assert app.state.chatbot_service is None
