from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from agromano.application.errors import InfrastructureError
from agromano.infrastructure.auth.context import AuthContext
from agromano.infrastructure.services.chatbot_service import ChatbotService
from agromano.interfaces.http.deps import get_auth_context, get_chatbot_service
from agromano.interfaces.http.schemas.chatbot import ChatbotRequest, ChatbotResponse

router = APIRouter(prefix="/chatbot", tags=["chatbot"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ChatbotResponse)
async def chatbot_reply(
    payload: ChatbotRequest,
    _: AuthContext = Depends(get_auth_context),
    chatbot: ChatbotService = Depends(get_chatbot_service),
) -> ChatbotResponse:
    try:
        answer = await chatbot.reply(payload.message)
    except Exception as exc:
        logger.exception("Error al generar la respuesta del chatbot")
        raise InfrastructureError("Error al generar la respuesta del chatbot") from exc
    return ChatbotResponse(response=answer)
