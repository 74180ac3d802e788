# 📄 File: app/modules/plant_ai/domain/services/synthesis.py
# 🧭 Purpose (Layman Explanation):
# Combines the four helpers' answers into one tidy plant record, filling any gap with a
# sensible default so the app never shows an empty field.
# 🧪 Purpose (Technical Summary):
# Pure merge of the species/health/care/personality envelopes into SynthesizedAnalysis,
# with tolerant coercion of model-provided values and mean-of-successes confidence.
# 🔗 Dependencies:
# models.analysis, models.agent_response
# 🔄 Connected Modules / Calls From:
# agent_system.py

import math
from typing import Any, Dict, List, Mapping, Optional

from ..models.agent_response import AgentResponse
from ..models.analysis import (
    DEFAULT_COMMON_NAME,
    DEFAULT_FAMILY,
    DEFAULT_HEALTH_SCORE,
    DEFAULT_OVERALL_HEALTH,
    DEFAULT_PROGNOSIS,
    DEFAULT_SPECIES,
    AnalysisMetadata,
    CareProfile,
    HealthSummary,
    PlantPersonality,
    SynthesizedAnalysis,
)


def _data(results: Mapping[str, AgentResponse], key: str) -> Dict[str, Any]:
    response = results.get(key)
    if response is None or not response.success or not response.data:
        return {}
    return response.data


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _score(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number):
        return default
    return max(0, min(100, round(number)))


def _strings(value: Any, default: Optional[List[str]] = None) -> List[str]:
    if value is None:
        return list(default or [])
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None and str(item).strip()]
    return list(default or [])


def _section(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def overall_confidence(results: Mapping[str, AgentResponse]) -> int:
    """Rounded mean confidence of the successful envelopes; 0 when none succeeded."""
    confidences = [response.confidence for response in results.values() if response.success]
    if not confidences:
        return 0
    return round(sum(confidences) / len(confidences))


def build_health(data: Dict[str, Any]) -> HealthSummary:
    return HealthSummary(
        overall_health=_text(data.get("overallHealth"), DEFAULT_OVERALL_HEALTH),
        health_score=_score(data.get("healthScore"), DEFAULT_HEALTH_SCORE),
        symptoms=_strings(data.get("symptoms")),
        diseases=_strings(data.get("diseases")),
        urgent_actions=_strings(data.get("urgentActions")),
        prognosis=_text(data.get("prognosis"), DEFAULT_PROGNOSIS),
    )


def build_care_profile(data: Dict[str, Any]) -> CareProfile:
    defaults = CareProfile()
    profile = _section(data.get("careProfile"))
    return CareProfile(
        watering=_text(profile.get("watering"), defaults.watering),
        sunlight=_text(profile.get("sunlight"), defaults.sunlight),
        humidity=_text(profile.get("humidity"), defaults.humidity),
        temperature=_text(profile.get("temperature"), defaults.temperature),
        fertilizing=_text(profile.get("fertilizing"), defaults.fertilizing),
    )


def build_personality(data: Dict[str, Any]) -> PlantPersonality:
    defaults = PlantPersonality()
    personality = _section(data.get("personality"))
    return PlantPersonality(
        energy_level=_text(personality.get("energyLevel"), defaults.energy_level),
        communication_style=_text(personality.get("communicationStyle"), defaults.communication_style),
        interests=_strings(personality.get("interests"), defaults.interests),
        quirks=_strings(personality.get("quirks")),
        mood=_text(personality.get("mood"), defaults.mood),
    )


def synthesize(results: Mapping[str, AgentResponse]) -> SynthesizedAnalysis:
    """
    Merge agent envelopes into the unified plant record.

    A failed agent contributes nothing; its fields take the hardcoded
    defaults. Values from a successful agent are kept even when falsy
    (a healthScore of 0 stays 0).
    """
    species = _data(results, "species")
    health = _data(results, "health")
    care = _data(results, "care")
    personality = _data(results, "personality")
    confidence = overall_confidence(results)

    return SynthesizedAnalysis(
        species=_text(species.get("species"), DEFAULT_SPECIES),
        common_name=_text(species.get("commonName"), DEFAULT_COMMON_NAME),
        family=_text(species.get("family"), DEFAULT_FAMILY),
        confidence=confidence,
        health=build_health(health),
        care_profile=build_care_profile(care),
        personality=build_personality(personality),
        catchphrases=_strings(personality.get("catchphrases")),
        immediate_actions=_strings(care.get("immediateActions")),
        weekly_routine=_strings(care.get("weeklyRoutine")),
        seasonal_tips=_strings(care.get("seasonalTips")),
        analysis=AnalysisMetadata(
            agent_success=sum(1 for response in results.values() if response.success),
            total_agents=len(results),
            overall_confidence=confidence,
        ),
    )
