"""Chat data models."""

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from providers.models import ChatTurn


class ChatRequest(BaseModel):
    """Chat request from user. Key and provider travel in headers."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    personality: Optional[str] = "casual"
    history: list[ChatTurn] = []
    custom_prompt: Optional[str] = Field(None, alias="customPrompt")


class ChatResponse(BaseModel):
    """Chat response from the provider."""
    response: str


class ErrorResponse(BaseModel):
    """User-safe error payload."""
    error: str


class Personality(BaseModel):
    """Built-in personality preset shown in the picker."""
    id: str
    name: str
    emoji: str
    description: str


class ExportMessage(BaseModel):
    """A rendered chat message as held by the front-end."""
    content: str
    sender: str
    timestamp: datetime


class ExportRequest(BaseModel):
    """Conversation export request."""
    messages: list[ExportMessage]
    personality: str = "casual"
    format: Literal["txt", "json"] = "txt"
