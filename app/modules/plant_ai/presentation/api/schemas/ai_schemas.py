# 📄 File: app/modules/plant_ai/presentation/api/schemas/ai_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the messages the mobile app sends to the AI endpoints and what it gets back.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the /api/v1/ai routes, camelCase on the wire.
# 🔗 Dependencies:
# pydantic, app.modules.plant_ai.domain.models
# 🔄 Connected Modules / Calls From:
# app.modules.plant_ai.presentation.api.v1.ai

"""
Plant AI API Schemas

Request Schemas:
- AnalysisRequest: Photo URL plus optional analysis context
- ChatRequest: User message, plant persona and recent history
- GardenChatRequest: Garden-wide question with a garden snapshot
- InsightsRequest: Plant facts for insight generation
- ProgressRequest: Older and newer photo plus the days between them
- HealthDiagnosisRequest: New photo of an existing plant

Response Schemas:
- AnalysisOutcome / AgentResponse / GardenChatResponse come straight from the domain
- InsightsResponse: List of insight strings
- ProgressReport / HealthRediagnosis come straight from the domain
"""

from typing import List, Optional

from pydantic import Field

from app.modules.plant_ai.domain.models import (
    AnalysisContext,
    CamelModel,
    ChatTurn,
    GardenContext,
    InsightPlant,
    PlantChatProfile,
)


class AnalysisRequest(CamelModel):
    image_url: str = Field(..., min_length=1, description="Public URL or data URL of the plant photo")
    context: Optional[AnalysisContext] = None


class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1, max_length=2000)
    plant: PlantChatProfile = Field(default_factory=PlantChatProfile)
    history: List[ChatTurn] = Field(default_factory=list)


class GardenChatRequest(CamelModel):
    user_message: str = Field(..., min_length=1, max_length=4000)
    garden_context: GardenContext
    conversation_history: List[ChatTurn] = Field(default_factory=list)


class InsightsRequest(CamelModel):
    plant: InsightPlant


class InsightsResponse(CamelModel):
    insights: List[str] = Field(default_factory=list)


class ProgressRequest(CamelModel):
    old_image_url: str = Field(..., min_length=1, description="Older photo of the plant")
    new_image_url: str = Field(..., min_length=1, description="Newer photo of the plant")
    days_difference: int = Field(..., ge=0, description="Days between the two photos")


class HealthDiagnosisRequest(CamelModel):
    image_url: str = Field(..., min_length=1, description="New photo of the plant")
    plant_name: Optional[str] = None
    species: Optional[str] = None
