"""Oryo Chat API application."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from config import get_settings
from chat import router as chat_router
from api_keys import router as api_keys_router
from providers import supported_providers

logger = structlog.get_logger()
settings = get_settings()

# httpx logs full request URLs at INFO; Gemini URLs carry the caller's key
logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "oryo_chat_api_started",
        environment=settings.environment,
        providers=supported_providers()
    )
    yield
    logger.info("oryo_chat_api_stopped")


app = FastAPI(
    title="Oryo Chat API",
    version="1.0.0",
    description="Bring-your-own-key chat backend for OpenAI, Anthropic, Groq and Gemini",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router, prefix="/api", tags=["Chat"])
app.include_router(api_keys_router, prefix="/api", tags=["API Keys"])


@app.exception_handler(RequestValidationError)
async def invalid_request_body(request: Request, exc: RequestValidationError):
    """Report malformed /api bodies in the `{error}` shape the front-end reads.

    Only field locations are logged; submitted values may include an API key.
    """
    if not request.url.path.startswith("/api/"):
        return await request_validation_exception_handler(request, exc)

    fields = [".".join(str(part) for part in err["loc"][1:]) for err in exc.errors()]
    logger.warning("request_body_rejected", path=request.url.path, fields=fields)

    content = {"error": "Invalid request body"}
    if request.url.path == "/api/validate-key":
        content = {"valid": False, **content}
    return JSONResponse(status_code=400, content=content)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "oryo-chat-backend"}


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Oryo Chat API",
        "version": "1.0.0",
        "providers": supported_providers(),
        "docs": "/docs",
        "health": "/health"
    }


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
