"""
Plant AI domain models.
"""

from .agent_response import AgentResponse, CostLedger
from .analysis import (
    AnalysisContext,
    AnalysisMetadata,
    AnalysisOutcome,
    CamelModel,
    CareProfile,
    HealthSummary,
    PlantPersonality,
    SynthesizedAnalysis,
)
from .chat import ChatReply, ChatTurn, Emotion, PlantChatProfile
from .checkup import HealthIssue, HealthRediagnosis, ProgressReport
from .garden import (
    GardenChatResponse,
    GardenContext,
    GardenInsight,
    GardenPlant,
    InsightPlant,
    SuggestedAction,
)

__all__ = [
    "AgentResponse",
    "CostLedger",
    "AnalysisContext",
    "AnalysisMetadata",
    "AnalysisOutcome",
    "CamelModel",
    "CareProfile",
    "HealthSummary",
    "PlantPersonality",
    "SynthesizedAnalysis",
    "ChatReply",
    "ChatTurn",
    "Emotion",
    "PlantChatProfile",
    "HealthIssue",
    "HealthRediagnosis",
    "ProgressReport",
    "GardenChatResponse",
    "GardenContext",
    "GardenInsight",
    "GardenPlant",
    "InsightPlant",
    "SuggestedAction",
]
