from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Load prompt from file
PROMPTS_DIR = Path(__file__).parent / "prompts"
CHATBOT_SYSTEM_PROMPT = (PROMPTS_DIR / "chatbot_system.txt").read_text(encoding="utf-8")


class ChatbotService:
    """Answers user questions about the application through the OpenAI chat API."""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini"):
        from openai import AsyncOpenAI

        self.client = AsyncOpenAI(api_key=api_key)
        self.model = model

    async def reply(self, message: str) -> str:
        """
        Send the user's message after the fixed system prompt.

        Raises:
            ValueError: If the provider returns an empty answer
            Exception: For OpenAI API errors
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": CHATBOT_SYSTEM_PROMPT},
                {"role": "user", "content": message},
            ],
            max_tokens=300,
            temperature=0.3,
        )
        content = response.choices[0].message.content
        if not content:
            raise ValueError("Empty response from OpenAI")
        logger.info("Chatbot answered with %d characters", len(content))
        return content.strip()
