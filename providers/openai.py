"""OpenAI and Groq adapters (OpenAI chat-completions schema)."""

from typing import Any, Sequence

from providers.base import ProviderAdapter, ProviderRequest
from providers.errors import ProviderProtocolError
from providers.models import ChatTurn


class OpenAIAdapter(ProviderAdapter):
    """Adapter for the OpenAI chat completions API."""

    name = "openai"

    @property
    def base_url(self) -> str:
        return self.settings.openai_base_url

    @property
    def model(self) -> str:
        return self.settings.openai_model

    def _auth_headers(self, api_key: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {api_key}"}

    def map_history(self, history: Sequence[ChatTurn]) -> list[dict[str, str]]:
        return [{"role": turn.role, "content": turn.content} for turn in history]

    def build_chat_request(
        self,
        api_key: str,
        system_prompt: str,
        user_message: str,
        history: Sequence[ChatTurn]
    ) -> ProviderRequest:
        messages = [
            {"role": "system", "content": system_prompt},
            *self.map_history(history),
            {"role": "user", "content": user_message},
        ]
        return ProviderRequest(
            method="POST",
            url=f"{self.base_url}/chat/completions",
            headers=self._auth_headers(api_key),
            body={
                "model": self.model,
                "messages": messages,
                "max_tokens": self.settings.max_tokens,
                "temperature": self.settings.temperature,
            },
        )

    def parse_reply(self, data: Any) -> str:
        return data["choices"][0]["message"]["content"]

    def build_probe_request(self, api_key: str) -> ProviderRequest:
        return ProviderRequest(
            method="GET",
            url=f"{self.base_url}/models",
            headers=self._auth_headers(api_key),
        )


class GroqAdapter(OpenAIAdapter):
    """Adapter for Groq's OpenAI-compatible endpoint."""

    name = "groq"

    @property
    def base_url(self) -> str:
        return self.settings.groq_base_url

    @property
    def model(self) -> str:
        return self.settings.groq_model

    def map_history(self, history: Sequence[ChatTurn]) -> list[dict[str, str]]:
        # Only explicit user turns stay "user"; everything else is the assistant
        return [
            {"role": "user" if turn.role == "user" else "assistant", "content": turn.content}
            for turn in history
        ]

    def parse_reply(self, data: Any) -> str:
        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices or not isinstance(choices[0], dict) or "message" not in choices[0]:
            raise ProviderProtocolError(self.name, "missing choices[0].message")
        return choices[0]["message"]["content"]
