"""FastAPI application for the Solace companion.

Provides REST API endpoints wrapping the Solace Python package for:
- Chat with safety-keyword alerts and conversation history
- Safety keyword management
- Emergency contacts
- Cycle, mood and wellness tracking
- Voice settings
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from solace import __version__
from solace.config import Settings
from solace.errors import NotFoundError, UpstreamError, ValidationError
from solace.logging_config import configure_logging
from solace.service import CompanionService, build_service
from web.backend.app.routers import chat, contacts, health, safety, voice

logger = logging.getLogger("solace.api")


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


async def _validation_error(_request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _upstream_error(_request: Request, exc: UpstreamError) -> JSONResponse:
    return JSONResponse(status_code=502, content={"detail": str(exc)})


async def _request_validation_error(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Reduce pydantic error dicts to JSON-safe location/message pairs."""
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": str(err.get("msg", ""))}
        for err in exc.errors()
    ]


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[CompanionService] = None,
) -> FastAPI:
    """Build the API with its own service instance.

    Each call creates fresh stores unless *service* is given, so tests get
    an isolated app per case.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Solace API",
        description=(
            "REST API for the Solace wellness and safety companion. "
            "Provides chat with safety alerts, keyword management, "
            "emergency contacts, health tracking and voice settings."
        ),
        version=__version__,
    )
    app.state.settings = settings
    app.state.service = service or build_service(settings)

    # -----------------------------------------------------------------------
    # CORS middleware
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(UpstreamError, _upstream_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)

    # -----------------------------------------------------------------------
    # Include routers
    # -----------------------------------------------------------------------
    app.include_router(chat.router)
    app.include_router(safety.router)
    app.include_router(contacts.router)
    app.include_router(health.router)
    app.include_router(voice.router)

    # -----------------------------------------------------------------------
    # Root and health-check endpoints
    # -----------------------------------------------------------------------

    @app.get("/", tags=["meta"])
    async def root():
        """Return basic API information."""
        return {
            "name": "Solace API",
            "version": __version__,
            "description": "Wellness and safety companion REST API",
            "docs": "/docs",
            "openapi": "/openapi.json",
        }

    @app.get("/health", tags=["meta"])
    async def health_check(request: Request):
        """Health check endpoint."""
        gateway = request.app.state.service.gateway
        return {
            "status": "healthy",
            "llm_configured": bool(getattr(gateway, "configured", True)),
        }

    logger.info("Solace API initialised (version %s)", __version__)
    return app
