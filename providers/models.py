"""Provider-agnostic chat data models."""

from typing import Any, Literal
from pydantic import BaseModel, model_validator

Role = Literal["user", "assistant"]


class ChatTurn(BaseModel):
    """One prior turn of the conversation.

    The front-end stores turns with a ``sender`` field (``"user"`` or ``"ai"``)
    rather than a ``role``; both shapes are accepted.
    """
    role: Role
    content: str

    @model_validator(mode="before")
    @classmethod
    def _role_from_sender(cls, data: Any) -> Any:
        if isinstance(data, dict) and "role" not in data and "sender" in data:
            role = "user" if data["sender"] == "user" else "assistant"
            data = {**data, "role": role}
        return data
