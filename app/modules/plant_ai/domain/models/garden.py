# 📄 File: app/modules/plant_ai/domain/models/garden.py
# 🧭 Purpose (Layman Explanation):
# Describes the whole garden the consultant chat looks at (every plant, its health, what needs water)
# and the structured advice it answers with.
# 🧪 Purpose (Technical Summary):
# Garden chat domain models: GardenContext snapshot, insights and suggested actions of the
# GardenChatResponse, and the insight-generator plant input.
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# garden_advisor.py, insight_generator.py, presentation schemas

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator

from .analysis import CamelModel
from .checkup import label_or


class GardenPlant(CamelModel):
    id: Optional[str] = None
    name: str
    nickname: Optional[str] = None
    species: str = "Desconocida"
    location: str = "Sin ubicación"
    health_score: int = 0
    last_watered: Optional[datetime] = None
    watering_frequency: Optional[int] = None


class CareScheduleSummary(CamelModel):
    needs_watering: List[str] = Field(default_factory=list)
    needs_fertilizing: List[str] = Field(default_factory=list)
    health_concerns: List[str] = Field(default_factory=list)


class EnvironmentalFactors(CamelModel):
    locations: List[str] = Field(default_factory=list)


class GardenContext(CamelModel):
    """Snapshot of the user's garden sent along with a garden chat message."""

    total_plants: int = 0
    plants_data: List[GardenPlant] = Field(default_factory=list)
    average_health_score: float = 0
    common_issues: List[str] = Field(default_factory=list)
    care_schedule_summary: CareScheduleSummary = Field(default_factory=CareScheduleSummary)
    environmental_factors: EnvironmentalFactors = Field(default_factory=EnvironmentalFactors)


InsightType = Literal["tip", "warning", "observation", "recommendation"]
ActionPriority = Literal["low", "medium", "high"]


class GardenInsight(CamelModel):
    type: InsightType = "observation"
    title: str = ""
    description: str = ""
    affected_plants: List[str] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def unknown_type_is_observation(cls, v: Any) -> str:
        return label_or(v, InsightType, "observation")


class SuggestedAction(CamelModel):
    action: str
    priority: ActionPriority = "medium"
    plant_ids: List[str] = Field(default_factory=list)

    @field_validator("priority", mode="before")
    @classmethod
    def unknown_priority_is_medium(cls, v: Any) -> str:
        return label_or(v, ActionPriority, "medium")


class GardenChatResponse(CamelModel):
    content: str
    insights: List[GardenInsight] = Field(default_factory=list)
    suggested_actions: List[SuggestedAction] = Field(default_factory=list)
    model: Optional[str] = None
    complexity: Optional[str] = None
    fallback: bool = False


class InsightCareProfile(CamelModel):
    watering_frequency: Optional[int] = None
    sunlight_requirement: str = "unknown"
    humidity_preference: str = "unknown"


class InsightChatMessage(CamelModel):
    content: str


class InsightPlant(CamelModel):
    """Plant facts the insight generator reasons about."""

    name: str
    species: str = "Unknown"
    health_score: int = 0
    location: str = "unknown"
    care_profile: InsightCareProfile = Field(default_factory=InsightCareProfile)
    chat_history: List[InsightChatMessage] = Field(default_factory=list)
