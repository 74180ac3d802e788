# 📄 File: app/modules/plant_ai/domain/agents/base.py
# 🧭 Purpose (Layman Explanation):
# The shared routine every AI helper follows: ask the model one question, read its JSON answer,
# and always hand back a report card, even when something went wrong.
# 🧪 Purpose (Technical Summary):
# BaseAgent implementing the never-raise agent contract: build an InferenceRequest, call the
# gateway in JSON mode, parse and validate the object, wrap it in an AgentResponse; every
# configuration, transport and content error becomes a failed envelope.
# 🔗 Dependencies:
# json, abc, app.shared.core.exceptions, app.shared.utils.logging, inference gateway
# 🔄 Connected Modules / Calls From:
# species_agent.py, health_agent.py, care_agent.py, personality_agent.py

import json
import math
from abc import ABC
from typing import Any, Dict, Optional

from app.shared.config.settings import Settings
from app.shared.core.exceptions import AIResponseFormatError
from app.shared.utils.logging import get_logger

from ..gateways.inference_gateway import (
    InferenceGateway,
    InferenceMessage,
    InferenceRequest,
)
from ..models.agent_response import AgentResponse

logger = get_logger(__name__)


def _finite_or_none(text: str) -> Optional[float]:
    value = float(text)
    return value if math.isfinite(value) else None


def parse_json_object(content: Optional[str], source: str) -> Dict[str, Any]:
    """
    Parse model output that must be a single JSON object.

    Numbers that overflow a float and the NaN/Infinity literals parse as None.

    Raises:
        AIResponseFormatError: content missing, not JSON, or not an object
    """
    if content is None or not content.strip():
        raise AIResponseFormatError(f"No content received from {source}")

    try:
        parsed = json.loads(content, parse_float=_finite_or_none, parse_constant=lambda _: None)
    except json.JSONDecodeError as e:
        raise AIResponseFormatError(
            f"Invalid JSON from {source}: {e.msg}",
            raw_content=content
        ) from e

    if not isinstance(parsed, dict):
        raise AIResponseFormatError(
            f"Expected a JSON object from {source}, got {type(parsed).__name__}",
            raw_content=content
        )
    return parsed


class BaseAgent(ABC):
    """
    Prompt-driven specialist wrapping exactly one inference call.

    Subclasses set the class attributes and expose an ``analyze`` coroutine
    that builds the prompt and delegates to ``run``.
    """

    name: str = "agent"
    config_key: str = ""
    error_prefix: str = "Error"
    default_reasoning: str = "Analysis completed"
    image_detail: str = "auto"

    def __init__(
        self,
        gateway: InferenceGateway,
        model: str,
        max_tokens: int,
        temperature: float
    ):
        self.gateway = gateway
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    @classmethod
    def from_settings(cls, gateway: InferenceGateway, settings: Settings, **kwargs):
        config = settings.get_ai_agent_config()[cls.config_key]
        return cls(
            gateway,
            model=config["model"],
            max_tokens=config["max_tokens"],
            temperature=config["temperature"],
            **kwargs
        )

    def _build_request(self, prompt: str, image_url: Optional[str] = None) -> InferenceRequest:
        message = InferenceMessage(
            role="user",
            content=prompt,
            image_url=image_url,
            image_detail=self.image_detail,
        )
        return InferenceRequest(
            model=self.model,
            messages=[message],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            json_mode=True,
        )

    def _reasoning(self, data: Dict[str, Any]) -> str:
        reasoning = data.get("reasoning")
        return str(reasoning) if reasoning else self.default_reasoning

    async def run(self, prompt: str, image_url: Optional[str] = None) -> AgentResponse:
        logger.debug(f"{self.name} agent starting", extra={"agent": self.name, "model": self.model})
        try:
            result = await self.gateway.complete(self._build_request(prompt, image_url))
            data = parse_json_object(result.content, f"{self.name} agent")

            response = AgentResponse.ok(
                data=data,
                confidence=data.get("confidence") or 0,
                reasoning=self._reasoning(data),
                cost=result.total_tokens or self.max_tokens,
            )
        except Exception as e:
            logger.warning(
                f"{self.name} agent failed: {e}",
                extra={"agent": self.name, "error_type": type(e).__name__}
            )
            return AgentResponse.failed(f"{self.error_prefix}: {e}")

        logger.debug(
            f"{self.name} agent completed",
            extra={"agent": self.name, "confidence": response.confidence, "cost": response.cost}
        )
        return response
