# 📄 File: app/modules/plant_ai/presentation/api/v1/ai.py
# 🧭 Purpose (Layman Explanation):
# The web doors into the plant AI: send a photo for a full analysis, chat with a plant,
# ask the garden consultant, get quick insights, compare two photos or re-check a plant's health.
# 🧪 Purpose (Technical Summary):
# FastAPI router for /api/v1/ai. Analysis and chat never fail at the HTTP level (errors live
# inside the envelopes); garden chat surfaces credential errors; insights, progress and
# health re-diagnosis map upstream failures to 502. PlantitasException subclasses are
# rendered by the app-level handler.
# 🔗 Dependencies:
# FastAPI, app.modules.plant_ai.presentation.dependencies, schemas.ai_schemas,
# app.shared.core.exceptions, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (prefix /ai)

"""
Plant AI API Endpoints

Endpoints:
- POST /analysis: Multi-agent analysis of a plant photo
- POST /chat: In-character reply from a plant
- POST /garden-chat: Garden-wide consultation
- POST /insights: Short insights for one plant
- POST /progress: Compare an older and a newer photo
- POST /health-diagnosis: Re-diagnose an existing plant from a new photo
"""

from fastapi import APIRouter, Depends

from app.modules.plant_ai.domain.models import (
    AgentResponse,
    AnalysisOutcome,
    GardenChatResponse,
    HealthRediagnosis,
    ProgressReport,
)
from app.modules.plant_ai.domain.services.agent_system import PlantAIAgentSystem
from app.modules.plant_ai.domain.services.chat_responder import PlantChatResponder
from app.modules.plant_ai.domain.services.garden_advisor import GardenAdvisor
from app.modules.plant_ai.domain.services.health_rediagnosis import HealthRediagnosisService
from app.modules.plant_ai.domain.services.insight_generator import PlantInsightGenerator
from app.modules.plant_ai.domain.services.progress_analyzer import PlantProgressAnalyzer
from app.modules.plant_ai.presentation.api.schemas.ai_schemas import (
    AnalysisRequest,
    ChatRequest,
    GardenChatRequest,
    HealthDiagnosisRequest,
    InsightsRequest,
    InsightsResponse,
    ProgressRequest,
)
from app.modules.plant_ai.presentation.dependencies import (
    get_agent_system,
    get_chat_responder,
    get_garden_advisor,
    get_health_rediagnosis,
    get_insight_generator,
    get_progress_analyzer,
)
from app.shared.core.exceptions import (
    AIResponseFormatError,
    ExternalAPIError,
    PlantitasException,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

ai_router = APIRouter()


def upstream_failure(operation: str, error: PlantitasException) -> ExternalAPIError:
    """502 carrying the error code of the provider or format failure."""
    return ExternalAPIError(
        f"{operation} failed: {error.message}",
        api_name="openai",
        details={"error_code": error.error_code},
    )


@ai_router.post(
    "/analysis",
    response_model=AnalysisOutcome,
    summary="Analyze a plant photo",
    description="Run species, health, care and personality agents and merge their results",
)
async def analyze_plant(
    payload: AnalysisRequest,
    agent_system: PlantAIAgentSystem = Depends(get_agent_system),
) -> AnalysisOutcome:
    return await agent_system.analyze_complete(payload.image_url, payload.context)


@ai_router.post(
    "/chat",
    response_model=AgentResponse,
    summary="Chat with a plant",
    description="Generate an in-character reply from the plant persona",
)
async def chat_with_plant(
    payload: ChatRequest,
    responder: PlantChatResponder = Depends(get_chat_responder),
) -> AgentResponse:
    return await responder.generate_plant_response(payload.message, payload.plant, payload.history)


@ai_router.post(
    "/garden-chat",
    response_model=GardenChatResponse,
    summary="Ask the garden consultant",
    responses={
        401: {"description": "AI provider rejected the credential"},
        500: {"description": "AI provider not configured"},
    },
)
async def garden_chat(
    payload: GardenChatRequest,
    advisor: GardenAdvisor = Depends(get_garden_advisor),
) -> GardenChatResponse:
    """
    Garden-wide consultation.

    Non-critical provider failures come back as a 200 fallback response
    with fallback=true.
    """
    return await advisor.respond(
        payload.user_message,
        payload.garden_context,
        payload.conversation_history,
    )


@ai_router.post(
    "/insights",
    response_model=InsightsResponse,
    summary="Generate plant insights",
    responses={502: {"description": "AI provider failed"}},
)
async def generate_insights(
    payload: InsightsRequest,
    generator: PlantInsightGenerator = Depends(get_insight_generator),
) -> InsightsResponse:
    try:
        insights = await generator.generate(payload.plant)
    except (ExternalAPIError, AIResponseFormatError) as e:
        logger.error(f"Insight generation failed: {e.message}", extra={"plant": payload.plant.name})
        raise upstream_failure("Insight generation", e) from e

    return InsightsResponse(insights=insights)


@ai_router.post(
    "/progress",
    response_model=ProgressReport,
    summary="Compare two photos of a plant",
    responses={502: {"description": "AI provider failed"}},
)
async def analyze_progress(
    payload: ProgressRequest,
    analyzer: PlantProgressAnalyzer = Depends(get_progress_analyzer),
) -> ProgressReport:
    try:
        return await analyzer.compare(payload.old_image_url, payload.new_image_url, payload.days_difference)
    except (ExternalAPIError, AIResponseFormatError) as e:
        logger.error(f"Progress analysis failed: {e.message}", extra={"days_difference": payload.days_difference})
        raise upstream_failure("Progress analysis", e) from e


@ai_router.post(
    "/health-diagnosis",
    response_model=HealthRediagnosis,
    summary="Re-diagnose a plant's health",
    responses={502: {"description": "AI provider failed"}},
)
async def rediagnose_health(
    payload: HealthDiagnosisRequest,
    service: HealthRediagnosisService = Depends(get_health_rediagnosis),
) -> HealthRediagnosis:
    try:
        return await service.rediagnose(payload.image_url, payload.plant_name, payload.species)
    except (ExternalAPIError, AIResponseFormatError) as e:
        logger.error(f"Health diagnosis failed: {e.message}")
        raise upstream_failure("Health diagnosis", e) from e
