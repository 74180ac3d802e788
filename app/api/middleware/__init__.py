# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the helpers that wrap every request: one keeps the request diary, the other makes
# errors look consistent.
# 🧪 Purpose (Technical Summary):
# Package initialization for the request logging middleware and the application exception
# handlers.
# 🔗 Dependencies:
# FastAPI / starlette middleware, app.shared.core, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main (create_application)

"""
Plantitas API Middleware Package

Components:
    - RequestLoggingMiddleware: request ID binding and request/response logging
    - register_exception_handlers: PlantitasException, validation and fallback handlers

Usage:
    from app.api.middleware import RequestLoggingMiddleware, register_exception_handlers

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
"""

from .error_handling import create_error_response, register_exception_handlers
from .logging import RequestLoggingMiddleware, get_request_id

__all__ = [
    "RequestLoggingMiddleware",
    "get_request_id",
    "create_error_response",
    "register_exception_handlers",
]
