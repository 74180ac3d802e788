# 📄 File: app/modules/plant_ai/domain/services/chat_responder.py
# 🧭 Purpose (Layman Explanation):
# Lets the user talk to their plant: the plant answers in its own voice, with its own mood
# and quirks, and we tag how it seems to feel.
# 🧪 Purpose (Technical Summary):
# Persona-conditioned single-turn chat. Builds the Spanish system prompt, sends system +
# recent history + user message in plain-text mode and wraps the reply with its detected
# emotion in an AgentResponse. Never raises.
# 🔗 Dependencies:
# gateways.inference_gateway, emotion.py, app.shared.config.settings, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.ai (POST /api/v1/ai/chat)

from typing import List, Optional, Sequence

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import AIResponseFormatError
from app.shared.utils.logging import get_logger

from ..gateways.inference_gateway import InferenceGateway, InferenceMessage, InferenceRequest
from ..models.agent_response import AgentResponse
from ..models.chat import ChatReply, ChatTurn, PlantChatProfile
from .emotion import detect_emotion

logger = get_logger(__name__)

CHAT_CONFIDENCE = 90
CHAT_REASONING = "Chat response generated with personality context"

CHAT_SYSTEM_PROMPT = """Eres {name}, una planta con personalidad {style}.

TU PERSONALIDAD:
- Energía: {energy}
- Estilo: {style}
- Estado de ánimo: {mood} (salud: {health})
- Peculiaridades: {quirks}

REGLAS:
1. Responde como esta planta específica
2. Menciona tu salud si es relevante
3. Usa tu personalidad única
4. Máximo 100 palabras
5. Incluye emojis de plantas 🌱🌿🍃

Mantén coherencia con tu personalidad establecida."""


def build_chat_system_prompt(plant: PlantChatProfile) -> str:
    personality = plant.personality
    return CHAT_SYSTEM_PROMPT.format(
        name=plant.name or plant.species,
        style=personality.communication_style,
        energy=personality.energy_level,
        mood=personality.mood,
        health=plant.health.overall_health if plant.health else "desconocida",
        quirks=", ".join(personality.quirks) or "Ninguna especial",
    )


class PlantChatResponder:
    """Generates in-character plant replies."""

    def __init__(self, inference: InferenceGateway, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        config = settings.get_ai_agent_config()["chat"]
        self.inference = inference
        self.model = config["model"]
        self.max_tokens = config["max_tokens"]
        self.temperature = config["temperature"]
        self.history_window = settings.CHAT_HISTORY_WINDOW

    def build_messages(
        self,
        message: str,
        plant: PlantChatProfile,
        history: Sequence[ChatTurn] = ()
    ) -> List[InferenceMessage]:
        recent = list(history)[-self.history_window:] if self.history_window > 0 else []
        return [
            InferenceMessage(role="system", content=build_chat_system_prompt(plant)),
            *(InferenceMessage(role=turn.role, content=turn.content) for turn in recent),
            InferenceMessage(role="user", content=message),
        ]

    async def generate_plant_response(
        self,
        message: str,
        plant: PlantChatProfile,
        history: Sequence[ChatTurn] = ()
    ) -> AgentResponse:
        """
        Answer a user message as the plant.

        Returns:
            AgentResponse whose data is a ChatReply dump ({content, emotion});
            failures come back with reasoning "Error en chat: ..."
        """
        try:
            request = InferenceRequest(
                model=self.model,
                messages=self.build_messages(message, plant, history),
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
            result = await self.inference.complete(request)

            content = (result.content or "").strip()
            if not content:
                raise AIResponseFormatError("No content received from Chat Agent")

            reply = ChatReply(content=content, emotion=detect_emotion(content))
        except Exception as e:
            logger.warning(f"Chat agent failed: {e}", extra={"agent": "chat", "error_type": type(e).__name__})
            return AgentResponse.failed(f"Error en chat: {e}")

        logger.debug("Chat reply generated", extra={"agent": "chat", "emotion": reply.emotion.value})
        return AgentResponse.ok(
            data=reply.model_dump(mode="json"),
            confidence=CHAT_CONFIDENCE,
            reasoning=CHAT_REASONING,
            cost=result.total_tokens or self.max_tokens,
        )
