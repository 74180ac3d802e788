# 📄 File: app/modules/plant_ai/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each AI endpoint the helpers it needs (the OpenAI connection, the analysis team,
# the plant chat, the garden consultant, the check-ups) so endpoints don't build them themselves.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers. The inference client lives on app.state (created in the
# lifespan); services are built per request from it and the cached Settings. Tests
# replace these through app.dependency_overrides.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.modules.plant_ai.domain.services.*
# 🔄 Connected Modules / Calls From:
# app.modules.plant_ai.presentation.api.v1.ai, app.main (lifespan)

from fastapi import Depends, Request

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import AIConfigurationError

from ..domain.gateways.inference_gateway import InferenceGateway
from ..domain.services.agent_system import PlantAIAgentSystem
from ..domain.services.chat_responder import PlantChatResponder
from ..domain.services.garden_advisor import GardenAdvisor
from ..domain.services.health_rediagnosis import HealthRediagnosisService
from ..domain.services.insight_generator import PlantInsightGenerator
from ..domain.services.progress_analyzer import PlantProgressAnalyzer


def get_inference_client(request: Request) -> InferenceGateway:
    """
    Get the application-wide inference client.

    Raises:
        AIConfigurationError: If the application started without one
    """
    client = getattr(request.app.state, "inference_client", None)
    if client is None:
        raise AIConfigurationError("Inference client not initialized")
    return client


def get_agent_system(
    inference: InferenceGateway = Depends(get_inference_client),
    settings: Settings = Depends(get_settings)
) -> PlantAIAgentSystem:
    return PlantAIAgentSystem(inference, settings=settings)


def get_chat_responder(
    inference: InferenceGateway = Depends(get_inference_client),
    settings: Settings = Depends(get_settings)
) -> PlantChatResponder:
    return PlantChatResponder(inference, settings=settings)


def get_garden_advisor(
    inference: InferenceGateway = Depends(get_inference_client),
    settings: Settings = Depends(get_settings)
) -> GardenAdvisor:
    return GardenAdvisor(inference, settings=settings)


def get_insight_generator(
    inference: InferenceGateway = Depends(get_inference_client),
    settings: Settings = Depends(get_settings)
) -> PlantInsightGenerator:
    return PlantInsightGenerator(inference, settings=settings)


def get_progress_analyzer(
    inference: InferenceGateway = Depends(get_inference_client),
    settings: Settings = Depends(get_settings)
) -> PlantProgressAnalyzer:
    return PlantProgressAnalyzer(inference, settings=settings)


def get_health_rediagnosis(
    inference: InferenceGateway = Depends(get_inference_client),
    settings: Settings = Depends(get_settings)
) -> HealthRediagnosisService:
    return HealthRediagnosisService(inference, settings=settings)
