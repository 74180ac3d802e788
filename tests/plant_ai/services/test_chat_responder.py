import pytest

from app.modules.plant_ai.domain.gateways.inference_gateway import InferenceResult
from app.modules.plant_ai.domain.models import ChatTurn, HealthSummary, PlantChatProfile, PlantPersonality
from app.modules.plant_ai.domain.services.chat_responder import PlantChatResponder, build_chat_system_prompt
from app.shared.core.exceptions import APIRateLimitError
from tests.fakes import FakeInferenceGateway

PLANT = PlantChatProfile(
    name="Mona",
    species="Monstera deliciosa",
    personality=PlantPersonality(
        energy_level="alta",
        communication_style="alegre",
        quirks=["saluda con las hojas", "odia el frío"],
        mood="contenta",
    ),
    health=HealthSummary(overall_health="good", health_score=82),
)


class TestSystemPrompt:
    def test_persona_fields(self):
        prompt = build_chat_system_prompt(PLANT)

        assert prompt.startswith("Eres Mona, una planta con personalidad alegre.")
        assert "- Energía: alta" in prompt
        assert "- Estado de ánimo: contenta (salud: good)" in prompt
        assert "- Peculiaridades: saluda con las hojas, odia el frío" in prompt
        assert "4. Máximo 100 palabras" in prompt

    def test_defaults_without_name_health_or_quirks(self):
        prompt = build_chat_system_prompt(PlantChatProfile(species="Ficus lyrata"))

        assert prompt.startswith("Eres Ficus lyrata,")
        assert "(salud: desconocida)" in prompt
        assert "- Peculiaridades: Ninguna especial" in prompt


class TestGeneratePlantResponse:
    async def test_reply_with_emotion(self, settings):
        gateway = FakeInferenceGateway({"chat": "¡Hola! Estoy feliz con tanta luz 🌱"}, tokens=42)
        responder = PlantChatResponder(gateway, settings=settings)

        response = await responder.generate_plant_response("¿Cómo estás?", PLANT)

        assert response.success is True
        assert response.data == {"content": "¡Hola! Estoy feliz con tanta luz 🌱", "emotion": "alegre"}
        assert response.confidence == 90
        assert response.reasoning == "Chat response generated with personality context"
        assert response.cost == 42

    async def test_request_is_plain_text(self, settings):
        gateway = FakeInferenceGateway({"chat": "Hola"})
        await PlantChatResponder(gateway, settings=settings).generate_plant_response("Hola", PLANT)

        request = gateway.requests[0]
        assert request.json_mode is False
        assert request.model == settings.OPENAI_TEXT_MODEL
        assert request.max_tokens == 150
        assert request.temperature == 0.7
        assert request.messages[-1].role == "user"
        assert request.messages[-1].content == "Hola"

    async def test_history_is_windowed(self, settings):
        history = [
            ChatTurn(role="user" if i % 2 == 0 else "assistant", content=f"turno {i}")
            for i in range(6)
        ]
        gateway = FakeInferenceGateway({"chat": "Hola"})
        await PlantChatResponder(gateway, settings=settings).generate_plant_response("¿Y hoy?", PLANT, history)

        messages = gateway.requests[0].messages
        assert [message.role for message in messages] == ["system", "user", "assistant", "user", "assistant", "user"]
        assert [message.content for message in messages[1:5]] == ["turno 2", "turno 3", "turno 4", "turno 5"]

    async def test_missing_usage_uses_token_cap(self, settings):
        gateway = FakeInferenceGateway({"chat": InferenceResult(content="Hola", total_tokens=None)})
        response = await PlantChatResponder(gateway, settings=settings).generate_plant_response("Hola", PLANT)

        assert response.cost == 150
        assert response.data["emotion"] == "neutral"

    @pytest.mark.parametrize("content", [None, "", "   "])
    async def test_empty_content_fails(self, settings, content):
        gateway = FakeInferenceGateway({"chat": content})
        response = await PlantChatResponder(gateway, settings=settings).generate_plant_response("Hola", PLANT)

        assert response.success is False
        assert response.reasoning == "Error en chat: No content received from Chat Agent"
        assert response.cost == 0

    async def test_provider_error_fails(self, settings):
        gateway = FakeInferenceGateway({"chat": APIRateLimitError("openai")})
        response = await PlantChatResponder(gateway, settings=settings).generate_plant_response("Hola", PLANT)

        assert response.success is False
        assert response.reasoning.startswith("Error en chat: Rate limit exceeded")
