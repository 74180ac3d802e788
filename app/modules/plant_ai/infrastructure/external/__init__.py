"""
External service integrations for the plant AI module.
"""

from .openai_client import OpenAIInferenceClient, is_placeholder_key

__all__ = [
    "OpenAIInferenceClient",
    "is_placeholder_key",
]
