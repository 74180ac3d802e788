# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the Plantitas AI service, opens the line to OpenAI,
# plugs in all the web endpoints and closes everything cleanly on shutdown.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: logging setup, inference client lifecycle
# on app.state, CORS and request logging middleware, exception handlers, router registration.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings, app.shared.utils.logging
# - app.modules.plant_ai.infrastructure.external.openai_client
# - app.api.v1.router, app.api.v1.health, app.api.middleware
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - Development server commands

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from app.api import DEFAULT_HEADERS
from app.api.middleware import RequestLoggingMiddleware, register_exception_handlers
from app.api.v1.health import health_router
from app.api.v1.router import api_v1_router
from app.modules.plant_ai.infrastructure.external.openai_client import (
    OpenAIInferenceClient,
    is_placeholder_key,
)
from app.shared.config.settings import Settings, get_settings
from app.shared.utils.logging import (
    get_logger,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Creates the shared inference client on startup (unless one was already
    attached, as tests do) and closes it on shutdown.
    """
    settings = get_settings()
    setup_logging()
    log_startup_event("plantitas-ai", settings.APP_VERSION, extra={"environment": settings.ENVIRONMENT})

    owns_client = getattr(app.state, "inference_client", None) is None
    if owns_client:
        app.state.inference_client = OpenAIInferenceClient.from_settings(settings)
        if is_placeholder_key(settings.OPENAI_API_KEY):
            logger.warning("OPENAI_API_KEY is not configured; every AI call will fail until it is set")
        logger.info(
            "Inference client initialized",
            extra={
                "vision_model": settings.OPENAI_VISION_MODEL,
                "text_model": settings.OPENAI_TEXT_MODEL,
                "max_retries": settings.OPENAI_MAX_RETRIES,
            }
        )

    try:
        yield  # Application is running
    finally:
        if owns_client:
            try:
                await app.state.inference_client.close()
            except Exception as e:
                logger.error(f"Inference client shutdown error: {e}")
            app.state.inference_client = None
        log_shutdown_event("plantitas-ai")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    @app.middleware("http")
    async def api_version_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers.update(DEFAULT_HEADERS)
        return response

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    # Health check routes (no prefix)
    app.include_router(health_router)

    # API v1 routes
    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/health",
            "api_base": "/api/v1",
        }

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.

    Used when running the application directly with python -m app.main.
    """
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
