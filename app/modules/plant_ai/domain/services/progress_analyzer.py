# 📄 File: app/modules/plant_ai/domain/services/progress_analyzer.py
# 🧭 Purpose (Layman Explanation):
# Looks at an old and a new photo of the same plant and tells the owner what changed,
# whether it got healthier, and what to do next.
# 🧪 Purpose (Technical Summary):
# One JSON-mode vision completion carrying both images at high detail; the object is
# coerced into a ProgressReport. Gateway and format errors propagate to the caller.
# 🔗 Dependencies:
# gateways.inference_gateway, agents.base.parse_json_object, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.ai (POST /api/v1/ai/progress)

from typing import Optional

from app.shared.config.settings import Settings, get_settings
from app.shared.utils.logging import get_logger

from ..agents.base import parse_json_object
from ..gateways.inference_gateway import InferenceGateway, InferenceMessage, InferenceRequest
from ..models.checkup import ProgressReport

logger = get_logger(__name__)

PROGRESS_SYSTEM_PROMPT = (
    "You are a botanical expert that analyzes plant progress images "
    "and returns results in JSON format."
)

PROGRESS_PROMPT = """Eres un botánico experto y analizas la progresión de una planta a lo largo del tiempo. Compara estas dos imágenes de la misma planta, tomadas con {days} días de diferencia. La primera imagen es la más antigua.

Basado en la comparación, proporciona:
1.  **Cambios Observados**: Una lista de cambios clave (ej. "Nuevas hojas han brotado", "La planta ha crecido en altura", "Las hojas amarillentas han desaparecido").
2.  **Mejora de Salud**: Un número del -100 al 100 que cuantifique la mejora (positivo) o el empeoramiento (negativo) de la salud.
3.  **Recomendaciones Futuras**: Una lista de consejos de cuidado para mantener o mejorar la salud de la planta.
4.  **Nueva Puntuación de Salud**: Una nueva puntuación de salud general para la planta, del 0 al 100.

IMPORTANTE: Responde EXCLUSIVAMENTE en formato JSON válido.
{{
  "changes": ["cambio1", "cambio2"],
  "healthImprovement": "número",
  "recommendations": ["recomendación1"],
  "newHealthScore": "número"
}}"""


def build_progress_prompt(days_difference: int) -> str:
    return PROGRESS_PROMPT.format(days=days_difference)


class PlantProgressAnalyzer:
    def __init__(self, inference: InferenceGateway, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        config = settings.get_ai_agent_config()["progress"]
        self.inference = inference
        self.model = config["model"]
        self.max_tokens = config["max_tokens"]
        self.temperature = config["temperature"]

    async def compare(self, old_image_url: str, new_image_url: str, days_difference: int) -> ProgressReport:
        """
        Compare two photos of the same plant, oldest first.

        Raises:
            AIResponseFormatError: Missing or non-object content
            ExternalAPIError: Provider failure (subclasses for auth, timeout, rate limit)
        """
        result = await self.inference.complete(InferenceRequest(
            model=self.model,
            messages=[
                InferenceMessage(role="system", content=PROGRESS_SYSTEM_PROMPT),
                InferenceMessage(
                    role="user",
                    content=build_progress_prompt(days_difference),
                    image_url=old_image_url,
                    extra_image_urls=(new_image_url,),
                    image_detail="high",
                ),
            ],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            json_mode=True,
        ))
        report = ProgressReport.model_validate(parse_json_object(result.content, "progress analyzer"))

        logger.info(
            "Plant progress analyzed",
            extra={
                "days_difference": days_difference,
                "changes": len(report.changes),
                "health_improvement": report.health_improvement,
            }
        )
        return report
