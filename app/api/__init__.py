# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a Python package so the app can import its routes and middleware.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer with version constants and re-exported exceptions.
# 🔗 Dependencies:
# app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.main, API route imports, middleware imports

"""
Plantitas AI API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/          # Request logging and exception handlers
    └── v1/                  # API version 1
        ├── router.py        # Main v1 router
        └── health.py        # Health check endpoints
"""

API_PREFIX = "/api"
CURRENT_VERSION = "v1"
SUPPORTED_VERSIONS = ["v1"]

DEFAULT_HEADERS = {
    "X-API-Version": CURRENT_VERSION,
    "X-Service": "plantitas-ai",
}

from app.shared.core.exceptions import (  # noqa: E402
    ExternalAPIError,
    PlantitasException,
    ValidationError,
)

__all__ = [
    "PlantitasException",
    "ValidationError",
    "ExternalAPIError",
    "API_PREFIX",
    "CURRENT_VERSION",
    "SUPPORTED_VERSIONS",
    "DEFAULT_HEADERS",
]
