# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Makes sure every error the service reports looks the same to the app (a code, a message
# and some details) instead of random crash pages.
# 🧪 Purpose (Technical Summary):
# Application exception handlers: PlantitasException hierarchy rendered through to_dict()
# with its own status, request validation errors as 400 VALIDATION_ERROR, anything
# unhandled as 500 INTERNAL_SERVER_ERROR (type exposed only in DEBUG).
# 🔗 Dependencies:
# FastAPI, app.shared.core.exceptions, app.shared.config.settings, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main (create_application)

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import PlantitasException, ValidationError
from app.shared.utils.logging import get_logger

from .logging import get_request_id

logger = get_logger(__name__)


def create_error_response(
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None
) -> JSONResponse:
    content = {
        "error": {
            "code": error_code,
            "message": message,
            "details": details or {},
            "status_code": status_code,
        }
    }
    if request_id:
        content["error"]["request_id"] = request_id
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


async def plantitas_exception_handler(request: Request, exc: PlantitasException) -> JSONResponse:
    """Handle custom Plantitas application exceptions."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"{exc.error_code}: {exc.message}",
        extra={"path": request.url.path, "status_code": exc.status_code, "error_code": exc.error_code}
    )
    body = exc.to_dict()
    request_id = get_request_id(request)
    if request_id:
        body["error"]["request_id"] = request_id
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(body))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures render like the domain ValidationError (400)."""
    error = ValidationError("Request validation failed", details={"errors": exc.errors()})
    return await plantitas_exception_handler(request, error)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Internal server error: {exc}", exc_info=True, extra={"path": request.url.path})
    return create_error_response(
        status_code=500,
        error_code="INTERNAL_SERVER_ERROR",
        message="An internal server error occurred",
        details={"error_type": type(exc).__name__} if get_settings().DEBUG else {},
        request_id=get_request_id(request),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PlantitasException, plantitas_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
