"""Chat API routes."""

from typing import Optional
from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse, Response
import structlog

from chat.export import export_conversation
from chat.models import ChatRequest, ChatResponse, ErrorResponse, ExportRequest, Personality
from chat.personalities import list_personalities
from chat.service import ChatService, get_chat_service
from providers import AdapterError, UnsupportedProviderError

logger = structlog.get_logger()

router = APIRouter()

GENERIC_ERROR = "Sorry, I couldn't process your request."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def chat(
    request: ChatRequest,
    x_api_key: Optional[str] = Header(None),
    x_provider: Optional[str] = Header(None),
    service: ChatService = Depends(get_chat_service)
):
    """Send a message to the selected provider and get a reply.

    The caller's API key and provider name come from the ``x-api-key`` and
    ``x-provider`` headers. Provider failures are reported with a generic
    message; raw provider errors are never returned.
    """
    if not x_api_key or not x_provider:
        logger.warning("chat_rejected", reason="missing_key_or_provider", provider=x_provider)
        return _error(400, "API key and provider are required")

    try:
        reply = await service.reply(request, x_provider, x_api_key)
    except UnsupportedProviderError:
        logger.warning("chat_rejected", reason="unsupported_provider", provider=x_provider)
        return _error(400, "Unsupported provider")
    except AdapterError as e:
        logger.error("chat_failed", provider=e.provider, error_type=type(e).__name__, cause=e.cause)
        return _error(500, GENERIC_ERROR)
    except Exception as e:
        logger.error("chat_failed", provider=x_provider, error_type=type(e).__name__)
        return _error(500, GENERIC_ERROR)

    logger.info("chat_completed", provider=x_provider, message_length=len(request.message))
    return ChatResponse(response=reply)


@router.post("/chat/export", responses={400: {"model": ErrorResponse}})
async def export_chat(request: ExportRequest):
    """Download the conversation as a text or JSON file."""
    try:
        exported = export_conversation(request.messages, request.personality, request.format)
    except ValueError as e:
        return _error(400, str(e))

    logger.info("chat_exported", format=request.format, message_count=len(request.messages))
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'}
    )


@router.get("/personalities", response_model=list[Personality])
async def personalities():
    """List the built-in personality presets."""
    return list_personalities()
