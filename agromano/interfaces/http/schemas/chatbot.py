from __future__ import annotations

from pydantic import BaseModel, Field


class ChatbotRequest(BaseModel):
    message: str = Field(min_length=1, max_length=2000)


class ChatbotResponse(BaseModel):
    response: str
