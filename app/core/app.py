"""
FastAPI application factory.

Creates and configures the FastAPI application.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
import logging

from .api_docs import build_api_docs
from .cache_middleware import NoCacheMiddleware
from .cors_middleware import AllowAnyOriginMiddleware
from .lifespan import lifespan
from .logging_config import setup_logging
from .logging_middleware import RequestLoggingMiddleware
from app.utils.exceptions import (
    PayloadTooLargeError,
    UpstreamError,
    ValidationError
)

logger = logging.getLogger(__name__)

SERVER_BANNER = "RASA NLU Server v1.0"

CORS_ALLOW_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept"]


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    # ── Initialize logging first ──
    from app.config.settings import get_settings
    settings = get_settings()
    setup_logging(
        log_level=settings.log_level,
        log_dir=settings.log_dir,
        log_json=settings.log_json,
    )

    app = FastAPI(
        title="rasa-server",
        description="Proxy forwarding training and parse requests to a RASA NLU server",
        version="1.0.0",
        lifespan=lifespan,
        # /api-docs.json is the only published API document
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_middleware(NoCacheMiddleware)
    app.add_middleware(AllowAnyOriginMiddleware, allow_headers=CORS_ALLOW_HEADERS)

    # ── Request logging middleware (must be added before CORS) ──
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=CORS_ALLOW_HEADERS,
    )

    _register_exception_handlers(app)
    _include_routers(app)
    _register_root_endpoints(app)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with logging."""

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request, exc):
        logger.error(f"Upstream failure: {exc.message} ({exc.url}) - {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"status": 500, "message": exc.message})

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request, exc):
        logger.warning(f"Validation error: {exc} - {request.method} {request.url.path}")
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(PayloadTooLargeError)
    async def payload_too_large_handler(request, exc):
        logger.warning(f"{exc} - {request.method} {request.url.path}")
        return JSONResponse(status_code=413, content={"detail": str(exc)})


def _include_routers(app: FastAPI) -> None:
    """Include all API routers."""
    from app.routers import config_router, nlu_router

    app.include_router(nlu_router.router)
    app.include_router(config_router.router)


def _register_root_endpoints(app: FastAPI) -> None:
    """Register root and API document endpoints."""

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Liveness probe."""
        return SERVER_BANNER

    @app.get("/api-docs.json")
    async def api_docs():
        """Swagger document describing the proxy routes."""
        return JSONResponse(content=build_api_docs())
