# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for API version 1 requests: it sends AI requests to the plant AI
# handlers and answers "what can this API do?".
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation: includes module routers under their prefixes and exposes
# the v1 info endpoint.
# 🔗 Dependencies:
# FastAPI, app.api.v1, app.modules.plant_ai.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# app.main (mounted at /api/v1)

from fastapi import APIRouter

from app.modules.plant_ai.presentation.api.v1 import ai_router
from app.shared.utils.logging import get_logger

from . import ROUTE_PREFIXES, get_api_info

logger = get_logger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()


@api_v1_router.get("/",
                   summary="API v1 Information",
                   description="Get API v1 version information and available endpoints",
                   tags=["API Info"])
async def api_v1_info() -> dict:
    return {
        **get_api_info(),
        "endpoints": {
            "analysis": f"/api/v1{ROUTE_PREFIXES['ai']}/analysis",
            "chat": f"/api/v1{ROUTE_PREFIXES['ai']}/chat",
            "garden_chat": f"/api/v1{ROUTE_PREFIXES['ai']}/garden-chat",
            "insights": f"/api/v1{ROUTE_PREFIXES['ai']}/insights",
            "progress": f"/api/v1{ROUTE_PREFIXES['ai']}/progress",
            "health_diagnosis": f"/api/v1{ROUTE_PREFIXES['ai']}/health-diagnosis",
            "health_check": "/health",
        },
    }


# =========================================================================
# MODULE ROUTER INCLUDES
# =========================================================================

api_v1_router.include_router(ai_router, prefix=ROUTE_PREFIXES["ai"], tags=["AI"])
logger.debug("Plant AI router loaded", extra={"prefix": ROUTE_PREFIXES["ai"]})
