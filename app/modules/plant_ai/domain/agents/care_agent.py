# 📄 File: app/modules/plant_ai/domain/agents/care_agent.py
# 🧭 Purpose (Layman Explanation):
# Writes a care plan (watering, light, fertilizer, weekly chores) for the plant based on
# what it is, how healthy it is and the current season. No photo needed.
# 🧪 Purpose (Technical Summary):
# Text-only agent producing the care plan JSON object; season resolved from the request
# context or the injected clock.
# 🔗 Dependencies:
# base.BaseAgent, prompts, services.seasons
# 🔄 Connected Modules / Calls From:
# app.modules.plant_ai.domain.services.agent_system

from datetime import date
from typing import Any, Callable, Dict, Optional

from ..gateways.inference_gateway import InferenceGateway
from ..models.agent_response import AgentResponse
from ..models.analysis import AnalysisContext
from ..services.seasons import resolve_season
from .base import BaseAgent
from .prompts import build_care_prompt


class CareRecommendationAgent(BaseAgent):
    name = "care"
    config_key = "care"
    error_prefix = "Error en recomendaciones"
    default_reasoning = "Care recommendations generated"

    def __init__(
        self,
        gateway: InferenceGateway,
        model: str,
        max_tokens: int,
        temperature: float,
        today: Callable[[], date] = date.today
    ):
        super().__init__(gateway, model, max_tokens, temperature)
        self.today = today

    async def analyze(
        self,
        species_info: Optional[Dict[str, Any]] = None,
        health_info: Optional[Dict[str, Any]] = None,
        context: Optional[AnalysisContext] = None
    ) -> AgentResponse:
        seasonal_context = context.seasonal_context if context else None
        season = resolve_season(seasonal_context, self.today().month)
        return await self.run(build_care_prompt(species_info, health_info, season))
