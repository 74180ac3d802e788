# 📄 File: app/modules/plant_ai/domain/models/checkup.py
# 🧭 Purpose (Layman Explanation):
# Describes the follow-up check-ups of a plant the user already owns: how it changed between
# two photos, and a fresh health diagnosis from a new photo.
# 🧪 Purpose (Technical Summary):
# ProgressReport (two-photo comparison) and HealthRediagnosis/HealthIssue (re-diagnosis)
# models. Model output is coerced field by field: unknown labels and unusable numbers take
# defaults, numbers are clamped into range.
# 🔗 Dependencies:
# pydantic, math, typing
# 🔄 Connected Modules / Calls From:
# progress_analyzer.py, health_rediagnosis.py, presentation schemas

import math
from typing import Any, List, Literal, Optional, get_args

from pydantic import Field, field_validator

from .analysis import CamelModel

OverallHealth = Literal["excellent", "good", "fair", "poor"]
IssueType = Literal["overwatering", "underwatering", "pest", "disease", "nutrient", "light", "other"]
IssueSeverity = Literal["low", "medium", "high"]
GrowthStage = Literal["seedling", "juvenile", "mature", "flowering", "dormant"]

DEFAULT_RECOMMENDATIONS = [
    "Mantén un riego regular según las necesidades de la planta",
    "Asegúrate de que reciba la cantidad adecuada de luz",
    "Revisa periódicamente en busca de plagas o enfermedades",
]


def bounded_number(value: Any, low: float, high: float) -> Optional[float]:
    """Finite number clamped into [low, high]; None when the value is not a usable number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number):
        return None
    return max(low, min(high, number))


def label_or(value: Any, allowed: Any, default: str) -> str:
    """Lower-cased value when it is one of the allowed literals, otherwise the default."""
    if isinstance(value, str) and value.strip().lower() in get_args(allowed):
        return value.strip().lower()
    return default


def _filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def text_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None and str(item).strip()]
    return []


class ProgressReport(CamelModel):
    """How a plant changed between an older and a newer photo."""

    changes: List[str] = Field(default_factory=list)
    health_improvement: int = Field(default=0, ge=-100, le=100)
    recommendations: List[str] = Field(default_factory=list)
    new_health_score: Optional[int] = Field(default=None, ge=0, le=100)

    @field_validator("changes", "recommendations", mode="before")
    @classmethod
    def coerce_lists(cls, v: Any) -> List[str]:
        return text_list(v)

    @field_validator("health_improvement", mode="before")
    @classmethod
    def coerce_improvement(cls, v: Any) -> int:
        number = bounded_number(v, -100, 100)
        return 0 if number is None else round(number)

    @field_validator("new_health_score", mode="before")
    @classmethod
    def coerce_score(cls, v: Any) -> Optional[int]:
        number = bounded_number(v, 0, 100)
        return None if number is None else round(number)


class HealthIssue(CamelModel):
    type: IssueType = "other"
    severity: IssueSeverity = "medium"
    description: str = Field(..., min_length=1)
    treatment: str = Field(..., min_length=1)

    @field_validator("type", mode="before")
    @classmethod
    def unknown_type_is_other(cls, v: Any) -> str:
        return label_or(v, IssueType, "other")

    @field_validator("severity", mode="before")
    @classmethod
    def unknown_severity_is_medium(cls, v: Any) -> str:
        return label_or(v, IssueSeverity, "medium")


class HealthRediagnosis(CamelModel):
    """
    Fresh health assessment of a plant from a new photo.

    Defaults mirror a cautious reading: fair health, mature stage,
    50% moisture and 70% confidence.
    """

    overall_health: OverallHealth = "fair"
    issues: List[HealthIssue] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=lambda: list(DEFAULT_RECOMMENDATIONS))
    moisture_level: float = Field(default=50, ge=0, le=100)
    growth_stage: GrowthStage = "mature"
    confidence: float = Field(default=70, ge=0, le=100)

    @field_validator("overall_health", mode="before")
    @classmethod
    def unknown_health_is_fair(cls, v: Any) -> str:
        return label_or(v, OverallHealth, "fair")

    @field_validator("growth_stage", mode="before")
    @classmethod
    def unknown_stage_is_mature(cls, v: Any) -> str:
        return label_or(v, GrowthStage, "mature")

    @field_validator("issues", mode="before")
    @classmethod
    def keep_complete_issues(cls, v: Any) -> List[Any]:
        """Issues without a description or treatment are dropped."""
        if not isinstance(v, list):
            return []
        return [
            item for item in v
            if isinstance(item, dict)
            and _filled(item.get("description"))
            and _filled(item.get("treatment"))
        ]

    @field_validator("recommendations", mode="before")
    @classmethod
    def recommendations_or_defaults(cls, v: Any) -> List[str]:
        if not isinstance(v, list):
            return list(DEFAULT_RECOMMENDATIONS)
        return text_list(v)

    @field_validator("moisture_level", mode="before")
    @classmethod
    def coerce_moisture(cls, v: Any) -> float:
        number = bounded_number(v, 0, 100)
        return 50 if number is None else number

    @field_validator("confidence", mode="before")
    @classmethod
    def coerce_confidence(cls, v: Any) -> float:
        number = bounded_number(v, 0, 100)
        return 70 if number is None else number
