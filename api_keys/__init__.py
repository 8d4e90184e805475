"""API key validation feature."""

from .models import KeyValidationRequest, KeyValidationResult
from .routes import router

__all__ = ["KeyValidationRequest", "KeyValidationResult", "router"]
