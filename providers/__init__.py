"""LLM provider adapters."""

from .base import ProviderAdapter, ProviderRequest, get_http_client
from .errors import (
    AdapterError, ProviderHTTPError, ProviderProtocolError,
    ProviderTransportError, UnsupportedProviderError
)
from .models import ChatTurn
from .registry import PROVIDERS, get_provider, send_chat, supported_providers, validate_key

__all__ = [
    "ProviderAdapter", "ProviderRequest", "get_http_client",
    "AdapterError", "ProviderHTTPError", "ProviderProtocolError",
    "ProviderTransportError", "UnsupportedProviderError",
    "ChatTurn", "PROVIDERS", "get_provider", "send_chat",
    "supported_providers", "validate_key"
]
