"""
Core utilities package for the Plantitas AI service.
Provides the application exception hierarchy.
"""

from .exceptions import (
    AIConfigurationError,
    AIResponseFormatError,
    APIAuthenticationError,
    APIQuotaExceededError,
    APIRateLimitError,
    APITimeoutError,
    ExternalAPIError,
    PlantitasException,
    StageGraphError,
    ValidationError,
)

__all__ = [
    "PlantitasException",
    "ValidationError",
    "ExternalAPIError",
    "APITimeoutError",
    "APIAuthenticationError",
    "APIRateLimitError",
    "APIQuotaExceededError",
    "AIConfigurationError",
    "AIResponseFormatError",
    "StageGraphError",
]
