# 📄 File: app/modules/plant_ai/domain/services/garden_advisor.py
# 🧭 Purpose (Layman Explanation):
# A garden consultant the user can chat with about all their plants at once. It reads the
# whole garden, answers with advice plus a list of tips and to-dos, and apologizes nicely
# when the AI service is having a bad moment.
# 🧪 Purpose (Technical Summary):
# Garden-wide JSON-mode consultation: builds the Spanish system prompt from GardenContext,
# picks a model by estimated complexity, validates the reply into GardenChatResponse and
# degrades to a fixed fallback on non-critical failures. Credential problems propagate.
# 🔗 Dependencies:
# gateways.inference_gateway, model_selection.py, agents.base.parse_json_object,
# app.shared.core.exceptions, app.shared.utils.logging, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.ai (POST /api/v1/ai/garden-chat)

from typing import List, Optional, Sequence

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import AIConfigurationError, APIAuthenticationError
from app.shared.utils.logging import get_logger

from ..agents.base import parse_json_object
from ..gateways.inference_gateway import InferenceGateway, InferenceMessage, InferenceRequest
from ..models.chat import ChatTurn
from ..models.garden import (
    GardenChatResponse,
    GardenContext,
    GardenInsight,
    GardenPlant,
    SuggestedAction,
)
from .model_selection import Complexity, estimate_tokens, select_optimal_model

logger = get_logger(__name__)

HIGH_COMPLEXITY_TOKENS = 2000
MEDIUM_COMPLEXITY_PLANTS = 10

GARDEN_SYSTEM_PROMPT = """Eres un experto botánico y consultor de jardines especializado en el cuidado integral de plantas de interior. Tu objetivo es proporcionar análisis, consejos y recomendaciones sobre todo el jardín del usuario.

**CONTEXTO DEL JARDÍN ACTUAL:**
- Total de plantas: {total_plants}
- Salud promedio del jardín: {average_health}/100
- Ubicaciones: {locations}

**PLANTAS EN EL JARDÍN:**
{plants}

**PROBLEMAS COMUNES IDENTIFICADOS:**
{common_issues}

**NECESIDADES ACTUALES DE CUIDADO:**
{care_needs}

**INSTRUCCIONES DE RESPUESTA:**
1. **Analiza holísticamente**: Considera todo el jardín como un ecosistema conectado
2. **Sé específico**: Menciona plantas específicas por nombre cuando sea relevante
3. **Prioriza**: Identifica las acciones más importantes primero
4. **Educa**: Explica el "por qué" detrás de tus recomendaciones
5. **Sé proactivo**: Sugiere prevención de problemas futuros
6. **Responde en JSON**: Estructura tu respuesta usando el formato especificado

Responde SIEMPRE en español y en formato JSON con esta estructura exacta:
{{
  "content": "Tu respuesta principal aquí...",
  "insights": [
    {{
      "type": "tip|warning|observation|recommendation",
      "title": "Título del insight",
      "description": "Descripción detallada",
      "affectedPlants": ["id1", "id2"]
    }}
  ],
  "suggestedActions": [
    {{
      "action": "Acción específica a tomar",
      "priority": "low|medium|high",
      "plantIds": ["id1", "id2"]
    }}
  ]
}}"""

FALLBACK_CONTENT = "Lo siento, hay un problema técnico temporal. Por favor intenta de nuevo en unos momentos."


def fallback_response(model: Optional[str] = None, complexity: Optional[str] = None) -> GardenChatResponse:
    return GardenChatResponse(
        content=FALLBACK_CONTENT,
        insights=[
            GardenInsight(
                type="warning",
                title="Problema técnico temporal",
                description=(
                    "Estamos experimentando dificultades técnicas. "
                    "Tu jardín está bien, es solo un problema de conectividad."
                ),
            )
        ],
        suggested_actions=[
            SuggestedAction(action="Reintentar la consulta en unos minutos", priority="medium")
        ],
        model=model,
        complexity=complexity,
        fallback=True,
    )


def _format_plant(plant: GardenPlant) -> str:
    last_watered = plant.last_watered.strftime("%d/%m/%Y") if plant.last_watered else "No registrado"
    frequency = (
        f"cada {plant.watering_frequency} días" if plant.watering_frequency else "No especificada"
    )
    return "\n".join([
        f"• {plant.nickname or plant.name} ({plant.species})",
        f"  - Ubicación: {plant.location}",
        f"  - Salud: {plant.health_score}/100",
        f"  - Última vez regada: {last_watered}",
        f"  - Frecuencia de riego: {frequency}",
    ])


def build_garden_system_prompt(garden: GardenContext) -> str:
    schedule = garden.care_schedule_summary
    care_needs = []
    if schedule.needs_watering:
        care_needs.append(f"- Plantas que necesitan riego: {len(schedule.needs_watering)}")
    if schedule.needs_fertilizing:
        care_needs.append(f"- Plantas que necesitan fertilización: {len(schedule.needs_fertilizing)}")
    if schedule.health_concerns:
        care_needs.append(f"- Plantas con preocupaciones de salud: {len(schedule.health_concerns)}")

    common_issues = (
        "\n".join(f"- {issue}" for issue in garden.common_issues)
        if garden.common_issues
        else "- No se han identificado problemas comunes"
    )

    return GARDEN_SYSTEM_PROMPT.format(
        total_plants=garden.total_plants,
        average_health=round(garden.average_health_score),
        locations=", ".join(garden.environmental_factors.locations) or "No especificadas",
        plants="\n".join(_format_plant(plant) for plant in garden.plants_data) or "- Sin plantas registradas",
        common_issues=common_issues,
        care_needs="\n".join(care_needs) or "- Sin necesidades pendientes",
    )


def estimate_complexity(system_prompt: str, user_message: str, total_plants: int) -> Complexity:
    """high above ~2000 prompt tokens, medium for gardens over 10 plants, low otherwise."""
    if estimate_tokens(system_prompt + user_message) > HIGH_COMPLEXITY_TOKENS:
        return "high"
    if total_plants > MEDIUM_COMPLEXITY_PLANTS:
        return "medium"
    return "low"


class GardenAdvisor:
    """Whole-garden consultant with a graceful fallback."""

    def __init__(self, inference: InferenceGateway, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        config = settings.get_ai_agent_config()["garden"]
        self.inference = inference
        self.max_tokens = config["max_tokens"]
        self.temperature = config["temperature"]
        self.history_window = settings.GARDEN_HISTORY_WINDOW

    def build_messages(
        self,
        system_prompt: str,
        user_message: str,
        history: Sequence[ChatTurn] = ()
    ) -> List[InferenceMessage]:
        recent = list(history)[-self.history_window:] if self.history_window > 0 else []
        return [
            InferenceMessage(role="system", content=system_prompt),
            *(InferenceMessage(role=turn.role, content=turn.content) for turn in recent),
            InferenceMessage(role="user", content=user_message),
        ]

    async def respond(
        self,
        user_message: str,
        garden: GardenContext,
        history: Sequence[ChatTurn] = ()
    ) -> GardenChatResponse:
        """
        Answer a garden-wide question.

        Raises:
            APIAuthenticationError: Provider rejected the credential
            AIConfigurationError: No usable API key configured
        """
        system_prompt = build_garden_system_prompt(garden)
        complexity = estimate_complexity(system_prompt, user_message, garden.total_plants)
        model = select_optimal_model("garden_analysis", complexity, "balanced")

        logger.info(
            "Garden chat request",
            extra={"model": model, "complexity": complexity, "total_plants": garden.total_plants}
        )

        try:
            result = await self.inference.complete(InferenceRequest(
                model=model,
                messages=self.build_messages(system_prompt, user_message, history),
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                json_mode=True,
            ))
            parsed = parse_json_object(result.content, "garden advisor")
            return GardenChatResponse.model_validate({
                **parsed,
                "model": result.model or model,
                "complexity": complexity,
                "fallback": False,
            })
        except (APIAuthenticationError, AIConfigurationError):
            logger.error("Garden chat failed on credentials", extra={"model": model})
            raise
        except Exception as e:
            logger.warning(
                f"Garden chat degraded to fallback: {e}",
                extra={"model": model, "complexity": complexity, "error_type": type(e).__name__}
            )
            return fallback_response(model=model, complexity=complexity)
