"""API key validation models."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, SecretStr


class KeyValidationRequest(BaseModel):
    """Key check request from the onboarding screen."""
    model_config = ConfigDict(populate_by_name=True)

    api_key: Optional[SecretStr] = Field(None, alias="apiKey")
    provider: Optional[str] = None


class KeyValidationResult(BaseModel):
    """Key check outcome."""
    valid: bool
    provider: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None
