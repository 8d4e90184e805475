"""API key validation routes."""

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import structlog

from api_keys.models import KeyValidationRequest, KeyValidationResult
from providers import get_http_client, supported_providers, validate_key

logger = structlog.get_logger()

router = APIRouter()


def _rejected(error: str) -> JSONResponse:
    result = KeyValidationResult(valid=False, error=error)
    return JSONResponse(status_code=400, content=result.model_dump(exclude_none=True))


@router.post(
    "/validate-key",
    response_model=KeyValidationResult,
    response_model_exclude_none=True
)
async def validate_api_key(
    request: KeyValidationRequest,
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """Check that an API key is accepted by its provider.

    This is a convenience check only: a valid key may still lack quota.
    """
    api_key = request.api_key.get_secret_value() if request.api_key else ""
    if not api_key or not request.provider:
        logger.warning("key_validation_rejected", reason="missing_key_or_provider")
        return _rejected("API key and provider are required")

    if request.provider.lower() not in supported_providers():
        logger.warning("key_validation_rejected", reason="unsupported_provider", provider=request.provider)
        return _rejected("Unsupported provider")

    if not await validate_key(request.provider, api_key, client):
        return KeyValidationResult(valid=False, error="Invalid API key")

    return KeyValidationResult(
        valid=True,
        provider=request.provider,
        message="API key validated successfully"
    )
