"""
In-memory test doubles for the inference boundary and the aiohttp session.
"""

import asyncio
import inspect
import json
from typing import Any, Dict, List, Optional, Tuple

from app.modules.plant_ai.domain.gateways.inference_gateway import (
    InferenceGateway,
    InferenceRequest,
    InferenceResult,
)

# Substrings that identify which prompt a request carries
AGENT_MARKERS = {
    "species": "identifica esta planta",
    "health": "diagnostica la salud",
    "care": "plan de cuidados",
    "personality": "Crea una personalidad",
    "garden": "consultor de jardines",
    "insights": "actionable, data-driven insights",
    "chat": "una planta con personalidad",
    "progress": "analizas la progresión",
    "rediagnosis": "expert botanist analyzing",
}

DEFAULT_TOKENS = 100


def agent_of(request: InferenceRequest) -> str:
    for message in request.messages:
        for name, marker in AGENT_MARKERS.items():
            if marker in message.content:
                return name
    return "unknown"


class FakeInferenceGateway(InferenceGateway):
    """
    Scripted gateway.

    ``replies`` maps an agent key to one of:
    - dict: returned as JSON content
    - str / None: returned as raw content
    - InferenceResult: returned as-is
    - BaseException instance: raised
    - callable(request): called, result handled as above (may be a coroutine)
    """

    def __init__(self, replies: Optional[Dict[str, Any]] = None, default: Any = None, tokens: int = DEFAULT_TOKENS):
        self.replies = dict(replies or {})
        self.default = default
        self.tokens = tokens
        self.requests: List[InferenceRequest] = []
        self.events: List[Tuple[str, str]] = []
        self.closed = False

    @property
    def calls(self) -> List[str]:
        return [agent_of(request) for request in self.requests]

    def requests_for(self, key: str) -> List[InferenceRequest]:
        return [request for request in self.requests if agent_of(request) == key]

    async def complete(self, request: InferenceRequest) -> InferenceResult:
        key = agent_of(request)
        self.requests.append(request)
        self.events.append(("start", key))
        try:
            reply = self.replies.get(key, self.default)
            if callable(reply) and not isinstance(reply, BaseException):
                reply = reply(request)
            if inspect.isawaitable(reply):
                reply = await reply
            if isinstance(reply, BaseException):
                raise reply
            if isinstance(reply, InferenceResult):
                return reply
            if isinstance(reply, (dict, list)):
                reply = json.dumps(reply)
            return InferenceResult(content=reply, total_tokens=self.tokens, model=request.model)
        finally:
            self.events.append(("end", key))

    async def close(self) -> None:
        self.closed = True


async def delayed(reply: Any, seconds: float = 0.01) -> Any:
    await asyncio.sleep(seconds)
    return reply


class FakeResponse:
    def __init__(self, status: int = 200, body: Any = None, text: str = "", headers: Optional[Dict[str, str]] = None):
        self.status = status
        self._body = body
        self._text = text
        self.headers = headers or {}

    async def json(self, content_type=None):
        if self._body is None:
            raise ValueError("no json body")
        return self._body

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession; each request pops the next scripted outcome."""

    def __init__(self, *outcomes: Any):
        self.outcomes = list(outcomes)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def close(self):
        self.closed = True


SPECIES_DATA = {
    "species": "Monstera deliciosa",
    "commonName": "Costilla de Adán",
    "family": "Araceae",
    "confidence": 90,
    "reasoning": "Hojas grandes con fenestraciones",
    "distinguishingFeatures": ["fenestraciones", "raíces aéreas"],
    "isIndoor": True,
    "rareness": "común",
}

HEALTH_DATA = {
    "overallHealth": "good",
    "healthScore": 82,
    "confidence": 80,
    "symptoms": ["puntas secas"],
    "diseases": [],
    "pests": [],
    "nutritionalIssues": [],
    "urgentActions": ["aumentar humedad"],
    "reasoning": "Ligera deshidratación en bordes",
    "prognosis": "Recuperación completa en dos semanas",
}

CARE_DATA = {
    "careProfile": {
        "watering": "cada 7 días",
        "sunlight": "luz indirecta brillante",
        "humidity": "alta",
        "temperature": "18-27°C",
        "fertilizing": "cada 2 semanas en primavera",
    },
    "immediateActions": ["pulverizar las hojas"],
    "weeklyRoutine": ["lunes: revisar humedad del sustrato"],
    "seasonalTips": ["reducir riego en invierno"],
    "troubleshooting": {"hojas amarillas": "reducir riego"},
    "confidence": 70,
    "reasoning": "Planta tropical de interior",
}

PERSONALITY_DATA = {
    "personality": {
        "energyLevel": "alta",
        "communicationStyle": "alegre",
        "interests": ["luz", "humedad"],
        "quirks": ["saluda con las hojas"],
        "mood": "contenta",
    },
    "catchphrases": ["¡Más luz, por favor!"],
    "chatStyle": "Habla con entusiasmo",
    "confidence": 60,
}

ALL_AGENTS_OK = {
    "species": SPECIES_DATA,
    "health": HEALTH_DATA,
    "care": CARE_DATA,
    "personality": PERSONALITY_DATA,
}
