# 📄 File: app/modules/plant_ai/domain/agents/health_agent.py
# 🧭 Purpose (Layman Explanation):
# Looks closely at the photo to spot disease, pests or nutrient problems, using the species
# name when we already know it.
# 🧪 Purpose (Technical Summary):
# High-detail vision agent producing the health diagnosis JSON object.
# 🔗 Dependencies:
# base.BaseAgent, prompts
# 🔄 Connected Modules / Calls From:
# app.modules.plant_ai.domain.services.agent_system

from typing import Any, Dict, Optional

from ..models.agent_response import AgentResponse
from .base import BaseAgent
from .prompts import build_health_prompt


class HealthDiagnosisAgent(BaseAgent):
    name = "health"
    config_key = "health"
    error_prefix = "Error en diagnóstico"
    default_reasoning = "Health diagnosis completed"
    image_detail = "high"

    async def analyze(
        self,
        image_url: str,
        species_info: Optional[Dict[str, Any]] = None
    ) -> AgentResponse:
        """
        Diagnose plant health.

        Args:
            image_url: Photo to inspect
            species_info: Data of a successful species envelope, if any
        """
        return await self.run(build_health_prompt(species_info), image_url=image_url)
