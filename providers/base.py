"""Base adapter for outbound LLM provider HTTP calls."""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional, Sequence
import httpx
import structlog
from pydantic import BaseModel

from config import Settings, get_settings
from providers.errors import (
    ProviderHTTPError, ProviderProtocolError, ProviderTransportError
)
from providers.models import ChatTurn

logger = structlog.get_logger()


class ProviderRequest(BaseModel):
    """A single outbound call, fully shaped for one provider."""
    method: str
    url: str
    headers: dict[str, str] = {}
    params: dict[str, str] = {}
    body: Optional[dict[str, Any]] = None


class ProviderAdapter(ABC):
    """Translates uniform chat calls and key probes into one provider's API.

    Subclasses only shape requests and pick the reply out of the response;
    sending, status checks and error normalization live here. The API key is
    placed in the request and nowhere else: it never reaches a log event or
    an exception message.
    """

    name: str = ""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or get_settings()
        self._client = client

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Use the injected client, or open a short-lived one for this call."""
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.settings.provider_timeout_seconds) as client:
            yield client

    async def _send(self, request: ProviderRequest) -> httpx.Response:
        async with self._get_client() as client:
            try:
                return await client.request(
                    request.method,
                    request.url,
                    headers=request.headers,
                    params=request.params or None,
                    json=request.body,
                    timeout=self.settings.provider_timeout_seconds,
                )
            except httpx.RequestError as e:
                # str(e) can carry the request URL, which holds the key for some providers
                raise ProviderTransportError(self.name, type(e).__name__) from e

    # ==================== Chat ====================

    @abstractmethod
    def build_chat_request(
        self,
        api_key: str,
        system_prompt: str,
        user_message: str,
        history: Sequence[ChatTurn]
    ) -> ProviderRequest:
        """Shape the provider-specific chat payload."""

    @abstractmethod
    def parse_reply(self, data: Any) -> str:
        """Extract the reply text from a decoded response body."""

    async def send_chat(
        self,
        api_key: str,
        system_prompt: str,
        user_message: str,
        history: Sequence[ChatTurn]
    ) -> str:
        """Send one chat turn and return the provider's reply text.

        Args:
            api_key: The caller's provider key
            system_prompt: Personality instructions
            user_message: The new user message
            history: Prior turns, oldest first (not truncated here)

        Returns:
            The reply text

        Raises:
            AdapterError: On transport failure, non-success status or an
                unexpected response body. No retry is attempted.
        """
        request = self.build_chat_request(api_key, system_prompt, user_message, history)
        response = await self._send(request)

        if not response.is_success:
            logger.warning(
                "provider_chat_rejected",
                provider=self.name,
                status_code=response.status_code
            )
            raise ProviderHTTPError(self.name, response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderProtocolError(self.name, "response body is not JSON") from e

        try:
            reply = self.parse_reply(data)
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderProtocolError(
                self.name, f"unexpected response shape ({type(e).__name__})"
            ) from e

        if not isinstance(reply, str):
            raise ProviderProtocolError(self.name, "reply is not text")

        logger.info("provider_chat_completed", provider=self.name, history_turns=len(history))
        return reply

    # ==================== Key validation ====================

    @abstractmethod
    def build_probe_request(self, api_key: str) -> ProviderRequest:
        """Shape the cheapest request that exercises the key."""

    def is_valid_probe(self, response: httpx.Response) -> bool:
        """Decide key validity from the probe response."""
        return response.is_success

    async def validate_key(self, api_key: str) -> bool:
        """Probe the provider with the key. Never raises; failures yield False."""
        try:
            response = await self._send(self.build_probe_request(api_key))
            valid = self.is_valid_probe(response)
        except Exception as e:
            logger.warning("key_validation_failed", provider=self.name, error=type(e).__name__)
            return False

        logger.info("key_validated", provider=self.name, valid=valid)
        return valid


# Dependency injection helper
async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """FastAPI dependency for a per-request outbound HTTP client."""
    settings = get_settings()
    client = httpx.AsyncClient(timeout=settings.provider_timeout_seconds)
    try:
        yield client
    finally:
        await client.aclose()
