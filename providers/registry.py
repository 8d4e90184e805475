"""Provider registry: the single lookup point from provider name to adapter."""

from typing import Optional, Sequence
import httpx
import structlog

from config import Settings
from providers.anthropic import AnthropicAdapter
from providers.base import ProviderAdapter
from providers.errors import UnsupportedProviderError
from providers.gemini import GeminiAdapter
from providers.models import ChatTurn
from providers.openai import GroqAdapter, OpenAIAdapter

logger = structlog.get_logger()

PROVIDERS: dict[str, type[ProviderAdapter]] = {
    "openai": OpenAIAdapter,
    "anthropic": AnthropicAdapter,
    "groq": GroqAdapter,
    "gemini": GeminiAdapter,
}


def supported_providers() -> list[str]:
    """Names accepted by get_provider."""
    return list(PROVIDERS)


def get_provider(
    provider_name: Optional[str],
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None
) -> ProviderAdapter:
    """Factory to get an adapter by provider name.

    Args:
        provider_name: One of "openai", "anthropic", "groq", "gemini"
        client: Optional shared HTTP client; a per-call client is used otherwise
        settings: Optional settings override

    Returns:
        Adapter instance for the provider

    Raises:
        UnsupportedProviderError: If no adapter exists for the name
    """
    key = (provider_name or "").lower()
    if key not in PROVIDERS:
        raise UnsupportedProviderError(provider_name)

    return PROVIDERS[key](client=client, settings=settings)


async def send_chat(
    provider_name: str,
    api_key: str,
    system_prompt: str,
    user_message: str,
    history: Sequence[ChatTurn],
    client: Optional[httpx.AsyncClient] = None
) -> str:
    """Send one chat turn to the named provider and return the reply text."""
    provider = get_provider(provider_name, client)
    return await provider.send_chat(api_key, system_prompt, user_message, history)


async def validate_key(
    provider_name: Optional[str],
    api_key: str,
    client: Optional[httpx.AsyncClient] = None
) -> bool:
    """Check a key against the named provider. Never raises."""
    try:
        provider = get_provider(provider_name, client)
    except UnsupportedProviderError:
        logger.warning("key_validation_unsupported_provider", provider=provider_name)
        return False
    return await provider.validate_key(api_key)
