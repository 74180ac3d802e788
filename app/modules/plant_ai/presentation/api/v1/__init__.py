"""
Plant AI API version 1.

Routers:
- ai_router (/ai): analysis, plant chat, garden chat and insights
"""

from .ai import ai_router

__all__ = ["ai_router"]
