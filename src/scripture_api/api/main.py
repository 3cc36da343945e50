"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..errors import CallableError, ErrorCode
from ..models.model_gateway import get_model_gateway
from ..routers import (
    system,
    scripture,
    study,
    lexicon,
    media,
    maintenance,
)


logger = logging.getLogger("scripture_api.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    gateway = get_model_gateway()
    logger.info("Starting Scripture Study API...")
    logger.info("Configured models: %s", {k: v["model"] for k, v in gateway.get_configured_models().items()})
    if not gateway.is_configured:
        logger.warning("GEMINI_API_KEY is not set; model-backed operations will fail")
    yield
    # Shutdown
    logger.info("Shutting down Scripture Study API...")


def _error_response(error: CallableError) -> JSONResponse:
    return JSONResponse(status_code=error.http_status, content={"error": error.to_dict()})


async def callable_error_handler(request: Request, exc: CallableError) -> JSONResponse:
    return _error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Malformed callable request to %s: %s", request.url.path, exc.errors())
    return _error_response(CallableError(ErrorCode.INVALID_ARGUMENT, "Bad Request"))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return _error_response(CallableError(ErrorCode.INTERNAL, str(exc) or "Internal error"))


def create_app() -> FastAPI:
    """Factory function to create the FastAPI app."""
    app = FastAPI(
        title="Scripture Study API",
        description="""
Authenticated callable operations backing a Bible study application.

Every operation is a `POST /{operationName}` taking `{"data": {...}}` and
answering `{"result": {...}}` on success or `{"error": {"status", "message"}}`
on failure.

**Key Features:**
- Chapter text, search, interlinear and audio translation.
- Storyboards, maps, theology and exegesis analyses, devotionals and study guides.
- Lexicon lookups and keyword analysis.
- Image generation.
- Firestore cache maintenance.
        """,
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CallableError, callable_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(system.router)
    app.include_router(scripture.router)
    app.include_router(study.router)
    app.include_router(lexicon.router)
    app.include_router(media.router)
    app.include_router(maintenance.router)

    return app


logging.basicConfig(level=get_settings().log_level.upper())

app = create_app()
