# 📄 File: app/modules/plant_ai/domain/services/insight_generator.py
# 🧭 Purpose (Layman Explanation):
# Reads what we know about one plant (health, spot in the house, care routine, recent chats)
# and comes up with a few short, useful observations for its owner.
# 🧪 Purpose (Technical Summary):
# Single text-mode completion turned into a list of insight strings (one per line,
# leading "- " bullets stripped, blanks dropped). Gateway errors propagate to the caller.
# 🔗 Dependencies:
# gateways.inference_gateway, app.shared.core.exceptions, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.ai (POST /api/v1/ai/insights)

from typing import List, Optional

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import AIResponseFormatError
from app.shared.utils.logging import get_logger

from ..gateways.inference_gateway import InferenceGateway, InferenceMessage, InferenceRequest
from ..models.garden import InsightPlant

logger = get_logger(__name__)

INSIGHTS_SYSTEM_PROMPT = "You are a helpful plant care assistant."

INSIGHTS_PROMPT = """Analyze the following plant data and generate 3-5 actionable, data-driven insights.
Focus on potential improvements, warnings, or interesting correlations in the data.
Each insight should be a short, clear statement.

Plant Data:
- Species: {species} ({name})
- Health Score: {health_score}/100
- Location: {location}
- Care Profile:
  - Watering: Every {watering} days
  - Sunlight: {sunlight}
  - Humidity: {humidity}
- Recent Chat Messages: {recent_messages}

Example Insights:
- "Your plant's health has been trending down. Consider checking for pests."
- "You mentioned 'yellow leaves' in a recent chat. This could be a sign of overwatering."
- "This plant prefers high humidity, but your room is listed as 'low'. Misting might help."

Generate insights for the provided plant data:"""

RECENT_MESSAGES = 3


def build_insights_prompt(plant: InsightPlant) -> str:
    care = plant.care_profile
    recent = [message.content for message in plant.chat_history[-RECENT_MESSAGES:]]
    return INSIGHTS_PROMPT.format(
        species=plant.species,
        name=plant.name,
        health_score=plant.health_score,
        location=plant.location,
        watering=care.watering_frequency if care.watering_frequency is not None else "?",
        sunlight=care.sunlight_requirement,
        humidity=care.humidity_preference,
        recent_messages="; ".join(recent) or "none",
    )


def parse_insights(content: str) -> List[str]:
    insights = []
    for line in content.split("\n"):
        line = line.strip()
        if line.startswith("- "):
            line = line[2:].strip()
        if line:
            insights.append(line)
    return insights


class PlantInsightGenerator:
    def __init__(self, inference: InferenceGateway, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        config = settings.get_ai_agent_config()["insights"]
        self.inference = inference
        self.model = config["model"]
        self.max_tokens = config["max_tokens"]
        self.temperature = config["temperature"]

    async def generate(self, plant: InsightPlant) -> List[str]:
        result = await self.inference.complete(InferenceRequest(
            model=self.model,
            messages=[
                InferenceMessage(role="system", content=INSIGHTS_SYSTEM_PROMPT),
                InferenceMessage(role="user", content=build_insights_prompt(plant)),
            ],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        ))
        if result.content is None:
            raise AIResponseFormatError("No content received from insight generator")

        insights = parse_insights(result.content)
        logger.info("Plant insights generated", extra={"plant": plant.name, "count": len(insights)})
        return insights
