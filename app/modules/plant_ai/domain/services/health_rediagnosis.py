# 📄 File: app/modules/plant_ai/domain/services/health_rediagnosis.py
# 🧭 Purpose (Layman Explanation):
# When the owner snaps a new photo of a plant they already have, this gives it a fresh
# check-up: how healthy it looks, what problems it has and how to treat them.
# 🧪 Purpose (Technical Summary):
# One JSON-mode vision completion (high detail) returning the submit_health_analysis object;
# missing or off-range fields take safety defaults through HealthRediagnosis validation.
# Gateway and format errors propagate to the caller.
# 🔗 Dependencies:
# gateways.inference_gateway, agents.base.parse_json_object, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.ai (POST /api/v1/ai/health-diagnosis)

from typing import Optional

from app.shared.config.settings import Settings, get_settings
from app.shared.utils.logging import get_logger

from ..agents.base import parse_json_object
from ..gateways.inference_gateway import InferenceGateway, InferenceMessage, InferenceRequest
from ..models.checkup import HealthRediagnosis

logger = get_logger(__name__)

REDIAGNOSIS_SYSTEM_PROMPT = """You are an expert botanist analyzing a plant's health. Look carefully at this plant image and provide a comprehensive health analysis.

**CRITICAL INSTRUCTIONS:**
1. **HEALTH FOCUS**: Focus specifically on the plant's current health status
2. **VISUAL ASSESSMENT**: Analyze visible signs of health/illness in the image
3. **ACCURATE RATING**: Provide an honest assessment of overall health
4. **LANGUAGE**: All text fields must be in SPANISH
5. **COMPLETE RESPONSE**: Fill all required fields

Rate the overall health as:
- 'excellent': Plant looks vibrant, healthy leaves, good color, no visible issues
- 'good': Plant looks healthy with minor imperfections
- 'fair': Plant shows some signs of stress but is recoverable
- 'poor': Plant shows significant health issues requiring immediate attention

Provide specific recommendations in Spanish for improving the plant's health.

Respond ONLY with a JSON object of this shape:
{
  "overallHealth": "excellent|good|fair|poor",
  "issues": [
    {
      "type": "overwatering|underwatering|pest|disease|nutrient|light|other",
      "severity": "low|medium|high",
      "description": "descripción en español",
      "treatment": "tratamiento en español"
    }
  ],
  "recommendations": ["recomendación en español"],
  "moistureLevel": 0-100,
  "growthStage": "seedling|juvenile|mature|flowering|dormant",
  "confidence": 0-100
}"""


def build_rediagnosis_prompt(plant_name: Optional[str] = None, species: Optional[str] = None) -> str:
    subject = species or plant_name or "plant"
    return f"Analyze the health of this {subject}. Provide a detailed health assessment."


class HealthRediagnosisService:
    def __init__(self, inference: InferenceGateway, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        config = settings.get_ai_agent_config()["rediagnosis"]
        self.inference = inference
        self.model = config["model"]
        self.max_tokens = config["max_tokens"]
        self.temperature = config["temperature"]

    async def rediagnose(
        self,
        image_url: str,
        plant_name: Optional[str] = None,
        species: Optional[str] = None
    ) -> HealthRediagnosis:
        """
        Re-diagnose an existing plant from a new photo.

        Raises:
            AIResponseFormatError: Missing or non-object content
            ExternalAPIError: Provider failure (subclasses for auth, timeout, rate limit)
        """
        logger.info("Health re-diagnosis requested", extra={"plant": plant_name or species or "Unknown"})

        result = await self.inference.complete(InferenceRequest(
            model=self.model,
            messages=[
                InferenceMessage(role="system", content=REDIAGNOSIS_SYSTEM_PROMPT),
                InferenceMessage(
                    role="user",
                    content=build_rediagnosis_prompt(plant_name, species),
                    image_url=image_url,
                    image_detail="high",
                ),
            ],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            json_mode=True,
        ))
        diagnosis = HealthRediagnosis.model_validate(parse_json_object(result.content, "health re-diagnosis"))

        logger.info(
            "Health re-diagnosis completed",
            extra={
                "overall_health": diagnosis.overall_health,
                "confidence": diagnosis.confidence,
                "issues": len(diagnosis.issues),
            }
        )
        return diagnosis
