# 📄 File: app/modules/plant_ai/domain/models/chat.py
# 🧭 Purpose (Layman Explanation):
# Describes a chat with a plant: who said what, the plant's persona, and the reply with the
# feeling we detected in it.
# 🧪 Purpose (Technical Summary):
# Chat domain models: Emotion enum, ChatTurn history entries, PlantChatProfile persona input
# and the ChatReply payload wrapped by the chat responder envelope.
# 🔗 Dependencies:
# pydantic, enum
# 🔄 Connected Modules / Calls From:
# emotion.py, chat_responder.py, garden_advisor.py, presentation schemas

from enum import Enum
from typing import Literal, Optional

from pydantic import Field

from .analysis import CamelModel, HealthSummary, PlantPersonality, SynthesizedAnalysis


class Emotion(str, Enum):
    """Emotion tag attached to a plant reply"""
    ALEGRE = "alegre"
    TRISTE = "triste"
    EMOCIONADO = "emocionado"
    PREOCUPADO = "preocupado"
    NEUTRAL = "neutral"


class ChatTurn(CamelModel):
    role: Literal["user", "assistant"]
    content: str


class PlantChatProfile(CamelModel):
    """Persona fields a plant needs to answer in character."""

    name: Optional[str] = None
    species: str = "Planta desconocida"
    personality: PlantPersonality = Field(default_factory=PlantPersonality)
    health: Optional[HealthSummary] = None

    @classmethod
    def from_analysis(cls, analysis: SynthesizedAnalysis, name: Optional[str] = None) -> "PlantChatProfile":
        return cls(
            name=name,
            species=analysis.species,
            personality=analysis.personality,
            health=analysis.health,
        )


class ChatReply(CamelModel):
    content: str
    emotion: Emotion = Emotion.NEUTRAL
