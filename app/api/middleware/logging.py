# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request to the plant AI service: what was asked, how long it took,
# and how it ended, tagged with an ID so one request's log lines can be found together.
# 🧪 Purpose (Technical Summary):
# Request logging middleware: reuses or creates X-Request-ID, binds it to the logging
# context vars for the whole request, logs start/finish with timing and echoes the header.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, app.shared.utils.logging, uuid, time
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration)

import time
import uuid
from typing import Optional, Set

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
DEFAULT_EXCLUDED_PATHS = {"/health", "/favicon.ico"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware.

    Every log line emitted while the request is handled carries its
    request_id (see JSONFormatter / ContextualFormatter).
    """

    def __init__(self, app: ASGIApp, excluded_paths: Optional[Set[str]] = None):
        super().__init__(app)
        self.excluded_paths = excluded_paths if excluded_paths is not None else DEFAULT_EXCLUDED_PATHS

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = self._get_or_create_request_id(request)

        with log_context(request_id=request_id):
            log_enabled = request.url.path not in self.excluded_paths
            start_time = time.time()

            if log_enabled:
                logger.info(
                    f"Request started: {request.method} {request.url.path}",
                    extra={"method": request.method, "path": request.url.path, "client": self._client_ip(request)}
                )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"Request failed: {request.method} {request.url.path}",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "error_type": type(e).__name__,
                        "duration_ms": round((time.time() - start_time) * 1000, 2),
                    }
                )
                raise

            if log_enabled:
                logger.info(
                    f"Request completed: {request.method} {request.url.path} {response.status_code}",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "status_code": response.status_code,
                        "duration_ms": round((time.time() - start_time) * 1000, 2),
                    }
                )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @staticmethod
    def _get_or_create_request_id(request: Request) -> str:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    @staticmethod
    def _client_ip(request: Request) -> str:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        return request.client.host if request.client else "unknown"


def get_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)
