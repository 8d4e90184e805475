"""Anthropic messages API adapter."""

from typing import Any, Sequence
import httpx

from providers.base import ProviderAdapter, ProviderRequest
from providers.models import ChatTurn


class AnthropicAdapter(ProviderAdapter):
    """Adapter for the Anthropic messages API.

    The system prompt travels in the dedicated ``system`` field, never as a
    message.
    """

    name = "anthropic"

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "x-api-key": api_key,
            "anthropic-version": self.settings.anthropic_version,
        }

    def build_chat_request(
        self,
        api_key: str,
        system_prompt: str,
        user_message: str,
        history: Sequence[ChatTurn]
    ) -> ProviderRequest:
        messages = [
            *({"role": turn.role, "content": turn.content} for turn in history),
            {"role": "user", "content": user_message},
        ]
        return ProviderRequest(
            method="POST",
            url=f"{self.settings.anthropic_base_url}/messages",
            headers=self._headers(api_key),
            body={
                "model": self.settings.anthropic_model,
                "max_tokens": self.settings.max_tokens,
                "system": system_prompt,
                "messages": messages,
            },
        )

    def parse_reply(self, data: Any) -> str:
        return data["content"][0]["text"]

    def build_probe_request(self, api_key: str) -> ProviderRequest:
        # No key introspection endpoint exists; a 1-token message is the cheapest probe
        return ProviderRequest(
            method="POST",
            url=f"{self.settings.anthropic_base_url}/messages",
            headers=self._headers(api_key),
            body={
                "model": self.settings.anthropic_model,
                "max_tokens": 1,
                "messages": [{"role": "user", "content": "test"}],
            },
        )

    def is_valid_probe(self, response: httpx.Response) -> bool:
        # Quota and request errors still mean the key itself was accepted
        return response.status_code != 401
