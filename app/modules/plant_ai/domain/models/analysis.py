# 📄 File: app/modules/plant_ai/domain/models/analysis.py
# 🧭 Purpose (Layman Explanation):
# Describes the complete plant record we build from a photo: which species it is, how healthy it looks,
# how to care for it and what kind of personality it has. Every field has a safe default.
# 🧪 Purpose (Technical Summary):
# Domain models for the analysis request context, the synthesized analysis record with hardcoded
# fallbacks, and the coordinator outcome envelope. JSON uses the camelCase names of the mobile client.
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# synthesis.py, agent_system.py, chat.py, presentation schemas

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .agent_response import AgentResponse

DEFAULT_SPECIES = "Especie no identificada"
DEFAULT_COMMON_NAME = "Nombre no identificado"
DEFAULT_FAMILY = "Familia no identificada"
DEFAULT_OVERALL_HEALTH = "unknown"
DEFAULT_HEALTH_SCORE = 50
DEFAULT_PROGNOSIS = "Pronóstico no disponible"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys and populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisContext(CamelModel):
    """Optional situational grounding passed along with an analysis request."""

    image_url: Optional[str] = None
    plant_data: Optional[Dict[str, Any]] = None
    user_history: Optional[Any] = None
    seasonal_context: Optional[Dict[str, Any]] = None


class HealthSummary(CamelModel):
    overall_health: str = DEFAULT_OVERALL_HEALTH
    health_score: int = DEFAULT_HEALTH_SCORE
    symptoms: List[str] = Field(default_factory=list)
    diseases: List[str] = Field(default_factory=list)
    urgent_actions: List[str] = Field(default_factory=list)
    prognosis: str = DEFAULT_PROGNOSIS


class CareProfile(CamelModel):
    watering: str = "semanal"
    sunlight: str = "luz_indirecta"
    humidity: str = "media"
    temperature: str = "templada"
    fertilizing: str = "mensual"


class PlantPersonality(CamelModel):
    energy_level: str = "media"
    communication_style: str = "amigable"
    interests: List[str] = Field(default_factory=lambda: ["sol", "agua"])
    quirks: List[str] = Field(default_factory=list)
    mood: str = "neutral"


class AnalysisMetadata(CamelModel):
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    agent_success: int = 0
    total_agents: int = 0
    overall_confidence: int = 0


class SynthesizedAnalysis(CamelModel):
    """
    Unified plant record merged from the four agent envelopes.

    Fields fall back to hardcoded defaults when the contributing agent failed,
    so consumers never see a missing value.
    """

    species: str = DEFAULT_SPECIES
    common_name: str = DEFAULT_COMMON_NAME
    family: str = DEFAULT_FAMILY
    confidence: int = 0

    health: HealthSummary = Field(default_factory=HealthSummary)
    care_profile: CareProfile = Field(default_factory=CareProfile)
    personality: PlantPersonality = Field(default_factory=PlantPersonality)
    catchphrases: List[str] = Field(default_factory=list)

    immediate_actions: List[str] = Field(default_factory=list)
    weekly_routine: List[str] = Field(default_factory=list)
    seasonal_tips: List[str] = Field(default_factory=list)

    analysis: AnalysisMetadata = Field(default_factory=AnalysisMetadata)


class AnalysisOutcome(CamelModel):
    """What analyze_complete hands back to its caller."""

    success: bool
    data: Optional[SynthesizedAnalysis] = None
    total_cost: int = 0
    agent_results: Dict[str, AgentResponse] = Field(default_factory=dict)
    summary: str = ""
