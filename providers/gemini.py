"""Google Gemini generateContent adapter."""

from typing import Any, Sequence

from providers.base import ProviderAdapter, ProviderRequest
from providers.models import ChatTurn


class GeminiAdapter(ProviderAdapter):
    """Adapter for the Gemini generateContent API.

    Only the current turn is sent: the system prompt and the user message are
    joined into a single text part and history is not forwarded.
    """

    name = "gemini"

    def build_chat_request(
        self,
        api_key: str,
        system_prompt: str,
        user_message: str,
        history: Sequence[ChatTurn]
    ) -> ProviderRequest:
        contents = [
            {"role": "user", "parts": [{"text": f"{system_prompt}\n\n{user_message}"}]}
        ]
        return ProviderRequest(
            method="POST",
            url=f"{self.settings.gemini_base_url}/models/{self.settings.gemini_model}:generateContent",
            params={"key": api_key},
            body={
                "contents": contents,
                "generationConfig": {
                    "maxOutputTokens": self.settings.max_tokens,
                    "temperature": self.settings.temperature,
                },
            },
        )

    def parse_reply(self, data: Any) -> str:
        return data["candidates"][0]["content"]["parts"][0]["text"]

    def build_probe_request(self, api_key: str) -> ProviderRequest:
        return ProviderRequest(
            method="GET",
            url=f"{self.settings.gemini_base_url}/models",
            params={"key": api_key},
        )
