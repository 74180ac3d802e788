# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the plant AI web API so a later version can be added without
# breaking the mobile app.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1: version metadata, route prefixes and OpenAPI tags
# used by the v1 router aggregation.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
Plantitas AI API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints (mounted at the root)

Module routers:
    - /ai: app.modules.plant_ai.presentation.api.v1.ai
"""

from typing import Any, Dict

__version__ = "1.0.0"
__api_version__ = "v1"
__status__ = "stable"

API_V1_CONFIG = {
    "version": __version__,
    "api_version": __api_version__,
    "status": __status__,
    "description": "Plantitas AI API Version 1",
    "features": ["analysis", "chat", "garden_chat", "insights"],
}

ROUTE_PREFIXES = {
    "ai": "/ai",
}

API_TAGS = [
    {
        "name": "AI",
        "description": "Multi-agent plant analysis, plant chat, garden consultant and insights"
    },
    {
        "name": "Health Check",
        "description": "System health and status monitoring"
    },
]


def get_api_info() -> Dict[str, Any]:
    """
    Get API v1 information and configuration

    Returns:
        Dictionary with API v1 metadata and route prefixes
    """
    return {
        "api_info": API_V1_CONFIG,
        "route_prefixes": ROUTE_PREFIXES,
        "tags": API_TAGS,
    }


__all__ = [
    "API_V1_CONFIG",
    "ROUTE_PREFIXES",
    "API_TAGS",
    "get_api_info",
]
