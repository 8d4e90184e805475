"""Chat feature: personalities, provider dispatch and export."""

from .models import ChatRequest, ChatResponse, ExportRequest, Personality
from .personalities import list_personalities, resolve_system_prompt
from .service import ChatService, get_chat_service
from .export import export_conversation
from .routes import router

__all__ = [
    "ChatRequest", "ChatResponse", "ExportRequest", "Personality",
    "list_personalities", "resolve_system_prompt",
    "ChatService", "get_chat_service", "export_conversation", "router"
]
