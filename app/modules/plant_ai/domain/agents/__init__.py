"""
Plant AI specialist agents.

Each agent wraps one inference call and never raises: failures come back
as AgentResponse envelopes with success=False.
"""

from .base import BaseAgent, parse_json_object
from .care_agent import CareRecommendationAgent
from .health_agent import HealthDiagnosisAgent
from .personality_agent import PersonalityAgent
from .species_agent import SpeciesIdentificationAgent

__all__ = [
    "BaseAgent",
    "parse_json_object",
    "SpeciesIdentificationAgent",
    "HealthDiagnosisAgent",
    "CareRecommendationAgent",
    "PersonalityAgent",
]
