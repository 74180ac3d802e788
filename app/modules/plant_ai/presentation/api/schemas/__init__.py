"""
Plant AI request/response schemas.
"""

from .ai_schemas import (
    AnalysisRequest,
    ChatRequest,
    GardenChatRequest,
    InsightsRequest,
    InsightsResponse,
)

__all__ = [
    "AnalysisRequest",
    "ChatRequest",
    "GardenChatRequest",
    "InsightsRequest",
    "InsightsResponse",
]
