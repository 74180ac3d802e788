# 📄 File: app/modules/plant_ai/domain/agents/species_agent.py
# 🧭 Purpose (Layman Explanation):
# Looks at the plant photo and says which species it is, its common name and family.
# 🧪 Purpose (Technical Summary):
# Vision agent returning the species JSON object in an AgentResponse envelope.
# 🔗 Dependencies:
# base.BaseAgent, prompts
# 🔄 Connected Modules / Calls From:
# app.modules.plant_ai.domain.services.agent_system

from ..models.agent_response import AgentResponse
from .base import BaseAgent
from .prompts import SPECIES_PROMPT


class SpeciesIdentificationAgent(BaseAgent):
    name = "species"
    config_key = "species"
    error_prefix = "Error en identificación"
    default_reasoning = "Species identification completed"
    image_detail = "low"

    async def analyze(self, image_url: str) -> AgentResponse:
        return await self.run(SPECIES_PROMPT, image_url=image_url)
