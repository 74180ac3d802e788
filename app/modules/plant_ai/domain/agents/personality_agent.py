# 📄 File: app/modules/plant_ai/domain/agents/personality_agent.py
# 🧭 Purpose (Layman Explanation):
# Invents a fun character for the plant (energy, way of talking, quirks, catchphrases)
# so the user can chat with it later.
# 🧪 Purpose (Technical Summary):
# High-temperature text agent producing the personality JSON object.
# 🔗 Dependencies:
# base.BaseAgent, prompts
# 🔄 Connected Modules / Calls From:
# app.modules.plant_ai.domain.services.agent_system

from typing import Any, Dict, Optional

from ..models.agent_response import AgentResponse
from .base import BaseAgent
from .prompts import build_personality_prompt


class PersonalityAgent(BaseAgent):
    name = "personality"
    config_key = "personality"
    error_prefix = "Error en personalidad"
    default_reasoning = "Personality profile created"

    async def analyze(
        self,
        species_info: Optional[Dict[str, Any]] = None,
        health_info: Optional[Dict[str, Any]] = None
    ) -> AgentResponse:
        return await self.run(build_personality_prompt(species_info, health_info))
