# 📄 File: app/modules/plant_ai/infrastructure/external/openai_client.py
# 🧭 Purpose (Layman Explanation):
# The phone line to OpenAI: it refuses to dial when no real key is configured, sends the
# question, and hands back the text answer and how many tokens it cost.
# 🧪 Purpose (Technical Summary):
# InferenceGateway implementation over the OpenAI chat-completions REST endpoint using the
# shared aiohttp APIClient (status mapping, optional tenacity retry) and AI operation logging.
# 🔗 Dependencies:
# app.shared.infrastructure.external_apis.api_client, app.shared.core.exceptions,
# app.shared.utils.logging, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.modules.plant_ai.presentation.dependencies, app.main lifespan

import time
from typing import Any, Dict, Optional

from app.shared.config.settings import Settings
from app.shared.core.exceptions import AIConfigurationError
from app.shared.infrastructure.external_apis.api_client import APIClient
from app.shared.utils.logging import get_logger

from ...domain.gateways.inference_gateway import (
    InferenceGateway,
    InferenceRequest,
    InferenceResult,
)
from ...domain.services.model_selection import estimate_cost

logger = get_logger(__name__)

API_NAME = "openai"
CHAT_COMPLETIONS_ENDPOINT = "chat/completions"

PLACEHOLDER_KEYS = {"demo-openai-key", "sk-placeholder", "changeme"}


def is_placeholder_key(api_key: Optional[str]) -> bool:
    """True when the key is missing or obviously a template value."""
    if not api_key or not api_key.strip():
        return True
    key = api_key.strip().lower()
    return key in PLACEHOLDER_KEYS or key.startswith("your-") or key.startswith("your_")


class OpenAIInferenceClient(InferenceGateway):
    """
    OpenAI chat-completions client.

    The credential check happens on every call so a misconfigured deployment
    fails fast without touching the network.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 45,
        max_retries: int = 0,
        retry_max_wait: float = 10.0,
        api_client: Optional[APIClient] = None
    ):
        self.api_key = api_key
        self.api_client = api_client or APIClient(
            base_url=base_url,
            api_key=api_key,
            api_name=API_NAME,
            timeout=timeout,
            max_retries=max_retries,
            retry_max_wait=retry_max_wait,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenAIInferenceClient":
        return cls(
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_API_URL,
            timeout=settings.OPENAI_TIMEOUT_SECONDS,
            max_retries=settings.OPENAI_MAX_RETRIES,
            retry_max_wait=settings.OPENAI_RETRY_MAX_WAIT,
        )

    async def complete(self, request: InferenceRequest) -> InferenceResult:
        if is_placeholder_key(self.api_key):
            raise AIConfigurationError()

        start_time = time.time()
        try:
            response = await self.api_client.post(CHAT_COMPLETIONS_ENDPOINT, data=request.to_payload())
        except Exception as e:
            logger.performance.log_ai_operation(
                operation="chat_completion",
                model=request.model,
                success=False,
                duration_ms=(time.time() - start_time) * 1000,
                error=str(e),
            )
            raise

        result = self._parse_response(response)
        logger.performance.log_ai_operation(
            operation="chat_completion",
            model=request.model,
            success=True,
            duration_ms=(time.time() - start_time) * 1000,
            tokens_used=result.total_tokens,
            estimated_cost=estimate_cost(result.total_tokens or 0, request.model),
            extra={"has_image": request.has_image, "json_mode": request.json_mode},
        )
        return result

    @staticmethod
    def _parse_response(response: Dict[str, Any]) -> InferenceResult:
        content = None
        choices = response.get("choices") or []
        if choices and isinstance(choices[0], dict):
            message = choices[0].get("message") or {}
            content = message.get("content")

        usage = response.get("usage") or {}
        total_tokens = usage.get("total_tokens")

        return InferenceResult(
            content=content if isinstance(content, str) else None,
            total_tokens=total_tokens if isinstance(total_tokens, int) else None,
            model=response.get("model"),
        )

    async def close(self) -> None:
        await self.api_client.close()
