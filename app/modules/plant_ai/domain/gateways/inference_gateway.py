# 📄 File: app/modules/plant_ai/domain/gateways/inference_gateway.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for asking the language model a question (text and maybe a photo)
# and getting its answer back, without caring which provider sits behind it.
# 🧪 Purpose (Technical Summary):
# Gateway interface and request/response value types for the external inference boundary.
# Concrete implementations live in the infrastructure layer; tests use in-memory fakes.
# 🔗 Dependencies:
# abc, pydantic, typing
# 🔄 Connected Modules / Calls From:
# agents, chat_responder.py, garden_advisor.py, insight_generator.py, progress_analyzer.py,
# health_rediagnosis.py, infrastructure.external.openai_client

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class InferenceMessage(BaseModel):
    """One role-tagged message, optionally carrying image references (all at the same detail)."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str
    image_url: Optional[str] = None
    image_detail: Literal["low", "high", "auto"] = "auto"
    extra_image_urls: Tuple[str, ...] = ()

    @property
    def image_urls(self) -> List[str]:
        urls = [self.image_url] if self.image_url else []
        return urls + list(self.extra_image_urls)

    def to_payload(self) -> Dict[str, Any]:
        urls = self.image_urls
        if not urls:
            return {"role": self.role, "content": self.content}
        return {
            "role": self.role,
            "content": [{"type": "text", "text": self.content}] + [
                {"type": "image_url", "image_url": {"url": url, "detail": self.image_detail}}
                for url in urls
            ],
        }


class InferenceRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    messages: List[InferenceMessage]
    max_tokens: int = Field(gt=0)
    temperature: float = Field(ge=0, le=2)
    json_mode: bool = False

    @property
    def has_image(self) -> bool:
        return any(message.image_urls for message in self.messages)

    def to_payload(self) -> Dict[str, Any]:
        """Chat-completions request body."""
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_payload() for message in self.messages],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
        if self.json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload


class InferenceResult(BaseModel):
    """Text payload of the first choice plus reported token usage."""

    model_config = ConfigDict(frozen=True)

    content: Optional[str] = None
    total_tokens: Optional[int] = None
    model: Optional[str] = None


class InferenceGateway(ABC):
    """
    Gateway interface for the hosted LLM endpoint.

    Implementations raise:
    - AIConfigurationError before any network call when the credential is unusable
    - ExternalAPIError (and subclasses) for non-2xx statuses, timeouts and network failures
    They never parse the content; that is the caller's job.
    """

    @abstractmethod
    async def complete(self, request: InferenceRequest) -> InferenceResult:
        """
        Run one chat completion.

        Args:
            request: Model, messages, token cap and temperature

        Returns:
            InferenceResult with content None when the provider sent no text
        """
        pass

    async def close(self) -> None:
        """Release transport resources."""
        return None
