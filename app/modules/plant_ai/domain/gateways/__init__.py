"""
Plant AI domain gateways (outbound ports).
"""

from .inference_gateway import (
    InferenceGateway,
    InferenceMessage,
    InferenceRequest,
    InferenceResult,
)

__all__ = [
    "InferenceGateway",
    "InferenceMessage",
    "InferenceRequest",
    "InferenceResult",
]
