# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick checkup endpoint that says whether the plant AI service is up and whether it has
# an AI key to work with.
# 🧪 Purpose (Technical Summary):
# Health check endpoints for load balancers and monitoring: liveness plus an inference
# configuration report (model names, key presence, API client stats). No network calls.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.modules.plant_ai
# 🔄 Connected Modules / Calls From:
# app.main (mounted at root), monitoring systems, load balancers

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.modules.plant_ai import get_module_info
from app.modules.plant_ai.infrastructure.external.openai_client import is_placeholder_key
from app.shared.config.settings import get_settings

health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Basic health check endpoint for load balancers and monitoring",
                   tags=["Health Check"])
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint

    Returns simple OK status for quick health verification.
    """
    settings = get_settings()
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "plantitas-ai",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "uptime_seconds": round((datetime.now(timezone.utc) - _app_start_time).total_seconds(), 1),
        }
    )


@health_router.get("/health/detailed",
                   summary="Detailed Health Check",
                   description="Health check including AI configuration and API client statistics",
                   tags=["Health Check"])
async def detailed_health_check(request: Request) -> JSONResponse:
    """
    Detailed health check.

    Reports "degraded" when no usable OpenAI key is configured: the
    service stays up but every agent will come back failed.
    """
    settings = get_settings()
    ai_configured = not is_placeholder_key(settings.OPENAI_API_KEY)

    components: Dict[str, Any] = {
        "inference": {
            "status": "healthy" if ai_configured else "unconfigured",
            "vision_model": settings.OPENAI_VISION_MODEL,
            "text_model": settings.OPENAI_TEXT_MODEL,
            "max_retries": settings.OPENAI_MAX_RETRIES,
        },
        "plant_ai": get_module_info(),
    }

    client = getattr(request.app.state, "inference_client", None)
    api_client = getattr(client, "api_client", None)
    if api_client is not None:
        components["inference"]["api_client"] = api_client.get_stats()

    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy" if ai_configured else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "plantitas-ai",
            "version": settings.APP_VERSION,
            "components": components,
        }
    )
