"""Chat service: personality resolution and provider dispatch."""

from typing import Optional
import httpx
from fastapi import Depends
import structlog

from config import get_settings
from chat.models import ChatRequest
from chat.personalities import resolve_system_prompt
from providers import get_http_client, get_provider

logger = structlog.get_logger()


class ChatService:
    """Turns a chat request into one provider call."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client
        self.history_window = get_settings().history_window

    async def reply(self, request: ChatRequest, provider_name: str, api_key: str) -> str:
        """Get the assistant reply for a chat request.

        Raises:
            UnsupportedProviderError: If provider_name is unknown
            AdapterError: If the provider call fails
        """
        provider = get_provider(provider_name, self.client)
        system_prompt = resolve_system_prompt(request.personality, request.custom_prompt)
        history = request.history[-self.history_window:] if self.history_window > 0 else []

        logger.info(
            "chat_dispatch",
            provider=provider.name,
            personality=request.personality,
            history_turns=len(history),
            dropped_turns=len(request.history) - len(history)
        )
        return await provider.send_chat(api_key, system_prompt, request.message, history)


# Dependency injection helper
async def get_chat_service(
    client: httpx.AsyncClient = Depends(get_http_client)
) -> ChatService:
    """FastAPI dependency for ChatService."""
    return ChatService(client)
