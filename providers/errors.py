"""Provider adapter exceptions."""

from typing import Optional


class AdapterError(Exception):
    """A provider call failed; carries the provider name and a short cause."""

    def __init__(self, provider: str, cause: str):
        self.provider = provider
        self.cause = cause
        super().__init__(f"{provider}: {cause}")


class ProviderTransportError(AdapterError):
    """The provider could not be reached (DNS, connection, timeout)."""


class ProviderHTTPError(AdapterError):
    """The provider answered with a non-success status."""

    def __init__(self, provider: str, status_code: int, cause: Optional[str] = None):
        self.status_code = status_code
        super().__init__(provider, cause or f"HTTP {status_code}")


class ProviderProtocolError(AdapterError):
    """The provider answered but the body lacks the expected shape."""


class UnsupportedProviderError(ValueError):
    """No adapter is registered under the requested provider name."""

    def __init__(self, provider: Optional[str]):
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")
