# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines the special error types the plant AI service uses to say
# what went wrong (missing key, the AI did not answer, the answer was garbled)
# in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# API client, inference client, agents, garden advisor, exception handlers

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class PlantitasException(Exception):
    """
    Base exception class for the Plantitas AI service.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }

    def to_http_exception(self) -> HTTPException:
        """Convert to FastAPI HTTPException."""
        return HTTPException(
            status_code=self.status_code,
            detail=self.to_dict()["error"]
        )


# =============================================================================
# REQUEST EXCEPTIONS
# =============================================================================

class ValidationError(PlantitasException):
    """
    Exception raised for invalid input data.
    Used when a request passes schema validation but is semantically unusable.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if field:
            details["field"] = field

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_ERROR"
        )


# =============================================================================
# EXTERNAL API EXCEPTIONS
# =============================================================================

class ExternalAPIError(PlantitasException):
    """
    Exception raised for external API failures.
    Used when the inference provider fails or answers with a non-2xx status.
    """

    def __init__(
        self,
        message: str = "External API error",
        api_name: Optional[str] = None,
        api_status_code: Optional[int] = None,
        api_response: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if api_name:
            details["api_name"] = api_name
        if api_status_code:
            details["api_status_code"] = api_status_code
        if api_response:
            details["api_response"] = api_response

        self.api_status_code = api_status_code
        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="EXTERNAL_API_ERROR"
        )


class APITimeoutError(ExternalAPIError):
    """Exception raised when an external API call times out."""

    def __init__(self, api_name: str, timeout_seconds: float = 10):
        super().__init__(
            message=f"{api_name} API request timed out after {timeout_seconds} seconds",
            api_name=api_name,
            details={
                "timeout_seconds": timeout_seconds,
                "suggestion": "Retry after some time or check network"
            }
        )
        self.error_code = "API_TIMEOUT"
        self.status_code = status.HTTP_504_GATEWAY_TIMEOUT


class APIAuthenticationError(ExternalAPIError):
    """Exception raised when an external API request is not properly authenticated."""

    def __init__(self, api_name: str, api_status_code: int = 401):
        super().__init__(
            message=f"Authentication failed for {api_name} API",
            api_name=api_name,
            api_status_code=api_status_code,
        )
        self.error_code = "API_AUTHENTICATION_ERROR"
        self.status_code = status.HTTP_401_UNAUTHORIZED


class APIRateLimitError(ExternalAPIError):
    """Exception raised when the provider throttles us (HTTP 429)."""

    def __init__(self, api_name: str, retry_after: Optional[str] = None):
        super().__init__(
            message=f"Rate limit exceeded for {api_name}",
            api_name=api_name,
            api_status_code=429,
            details={"retry_after": retry_after} if retry_after else None,
        )
        self.error_code = "API_RATE_LIMIT"
        self.status_code = status.HTTP_429_TOO_MANY_REQUESTS


class APIQuotaExceededError(ExternalAPIError):
    """Exception raised when the account quota or billing limit is exhausted."""

    def __init__(self, api_name: str, api_status_code: int = 402):
        super().__init__(
            message=f"API quota exceeded for {api_name}",
            api_name=api_name,
            api_status_code=api_status_code,
        )
        self.error_code = "API_QUOTA_EXCEEDED"
        self.status_code = status.HTTP_429_TOO_MANY_REQUESTS


# =============================================================================
# AI EXCEPTIONS
# =============================================================================

class AIConfigurationError(PlantitasException):
    """
    Exception raised when the inference credential is missing or a placeholder.
    Raised before any network call is attempted.
    """

    def __init__(self, message: str = "OpenAI API key not configured"):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code="AI_CONFIGURATION_ERROR"
        )


class AIResponseFormatError(PlantitasException):
    """
    Exception raised when the model answered but the content is unusable:
    empty, not JSON, or JSON that is not an object.
    """

    def __init__(
        self,
        message: str = "Malformed AI response",
        raw_content: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if raw_content:
            details["raw_content"] = raw_content[:200]

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="AI_RESPONSE_FORMAT_ERROR"
        )


class StageGraphError(PlantitasException):
    """
    Exception raised when an orchestration graph is malformed
    (duplicate stage, unknown dependency, cycle).
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="STAGE_GRAPH_ERROR"
        )
