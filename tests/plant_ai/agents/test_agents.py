import asyncio
from datetime import date

import pytest

from app.modules.plant_ai.domain.agents import (
    CareRecommendationAgent,
    HealthDiagnosisAgent,
    PersonalityAgent,
    SpeciesIdentificationAgent,
    parse_json_object,
)
from app.modules.plant_ai.domain.gateways.inference_gateway import InferenceResult
from app.modules.plant_ai.domain.models import AgentResponse, AnalysisContext
from app.shared.core.exceptions import (
    AIConfigurationError,
    AIResponseFormatError,
    APITimeoutError,
    ExternalAPIError,
)
from tests.fakes import (
    CARE_DATA,
    HEALTH_DATA,
    PERSONALITY_DATA,
    SPECIES_DATA,
    FakeInferenceGateway,
)

IMAGE_URL = "https://example.com/monstera.jpg"


def build_agents(gateway, settings):
    return {
        "species": SpeciesIdentificationAgent.from_settings(gateway, settings),
        "health": HealthDiagnosisAgent.from_settings(gateway, settings),
        "care": CareRecommendationAgent.from_settings(gateway, settings),
        "personality": PersonalityAgent.from_settings(gateway, settings),
    }


async def invoke(name, agent):
    if name == "species":
        return await agent.analyze(IMAGE_URL)
    if name == "health":
        return await agent.analyze(IMAGE_URL, SPECIES_DATA)
    if name == "care":
        return await agent.analyze(SPECIES_DATA, HEALTH_DATA, None)
    return await agent.analyze(SPECIES_DATA, HEALTH_DATA)


ERROR_PREFIXES = {
    "species": "Error en identificación:",
    "health": "Error en diagnóstico:",
    "care": "Error en recomendaciones:",
    "personality": "Error en personalidad:",
}


class TestAgentFailures:
    @pytest.mark.parametrize("name", ["species", "health", "care", "personality"])
    @pytest.mark.parametrize("error", [
        ExternalAPIError("Server error for openai (500)", api_name="openai", api_status_code=500),
        APITimeoutError("openai", 45),
        AIConfigurationError(),
    ])
    async def test_transport_and_config_errors_become_failed_envelopes(self, settings, name, error):
        gateway = FakeInferenceGateway(default=error)
        response = await invoke(name, build_agents(gateway, settings)[name])

        assert response.success is False
        assert response.data is None
        assert response.confidence == 0
        assert response.cost == 0
        assert response.reasoning.startswith(ERROR_PREFIXES[name])

    @pytest.mark.parametrize("name", ["species", "health", "care", "personality"])
    @pytest.mark.parametrize("content", ["Lo siento, no puedo ver la imagen", "", None, "[1, 2, 3]", "{\"species\": "])
    async def test_unusable_content_becomes_failed_envelope(self, settings, name, content):
        gateway = FakeInferenceGateway(default=content)
        response = await invoke(name, build_agents(gateway, settings)[name])

        assert response.success is False
        assert response.confidence == 0
        assert response.cost == 0
        assert response.reasoning.startswith(ERROR_PREFIXES[name])

    async def test_cancellation_is_not_swallowed(self, settings):
        async def never():
            await asyncio.sleep(10)

        gateway = FakeInferenceGateway(default=lambda request: never())
        agent = SpeciesIdentificationAgent.from_settings(gateway, settings)

        task = asyncio.create_task(agent.analyze(IMAGE_URL))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task


class TestAgentSuccess:
    async def test_species_envelope(self, settings):
        gateway = FakeInferenceGateway({"species": SPECIES_DATA}, tokens=321)
        response = await SpeciesIdentificationAgent.from_settings(gateway, settings).analyze(IMAGE_URL)

        assert response.success is True
        assert response.data["species"] == "Monstera deliciosa"
        assert response.confidence == 90
        assert response.reasoning == "Hojas grandes con fenestraciones"
        assert response.cost == 321

    async def test_species_request_shape(self, settings):
        gateway = FakeInferenceGateway({"species": SPECIES_DATA})
        await SpeciesIdentificationAgent.from_settings(gateway, settings).analyze(IMAGE_URL)

        request = gateway.requests[0]
        payload = request.to_payload()
        assert request.model == settings.OPENAI_VISION_MODEL
        assert payload["max_tokens"] == 300
        assert payload["temperature"] == 0.1
        assert payload["response_format"] == {"type": "json_object"}
        image_part = payload["messages"][0]["content"][1]
        assert image_part["image_url"] == {"url": IMAGE_URL, "detail": "low"}

    async def test_health_uses_high_detail_and_species_context(self, settings):
        gateway = FakeInferenceGateway({"health": HEALTH_DATA})
        await HealthDiagnosisAgent.from_settings(gateway, settings).analyze(IMAGE_URL, SPECIES_DATA)

        request = gateway.requests[0]
        assert request.max_tokens == 400
        assert request.temperature == 0.2
        assert request.messages[0].image_detail == "high"
        assert "La planta es: Monstera deliciosa (Costilla de Adán)" in request.messages[0].content

    async def test_health_without_species(self, settings):
        gateway = FakeInferenceGateway({"health": HEALTH_DATA})
        await HealthDiagnosisAgent.from_settings(gateway, settings).analyze(IMAGE_URL, None)

        assert "Especie no identificada previamente" in gateway.requests[0].messages[0].content

    async def test_missing_usage_falls_back_to_token_cap(self, settings):
        gateway = FakeInferenceGateway({
            "care": InferenceResult(content='{"confidence": 70, "careProfile": {}}', total_tokens=None)
        })
        response = await CareRecommendationAgent.from_settings(gateway, settings).analyze(SPECIES_DATA, HEALTH_DATA)

        assert response.success is True
        assert response.cost == 350
        assert response.reasoning == "Care recommendations generated"

    async def test_care_is_text_only_and_uses_season(self, settings):
        gateway = FakeInferenceGateway({"care": CARE_DATA})
        agent = CareRecommendationAgent.from_settings(gateway, settings, today=lambda: date(2024, 7, 15))
        await agent.analyze(SPECIES_DATA, HEALTH_DATA, AnalysisContext())

        request = gateway.requests[0]
        prompt = request.messages[0].content
        assert request.model == settings.OPENAI_TEXT_MODEL
        assert request.has_image is False
        assert "Estación: verano" in prompt
        assert "Ambiente: Interior" in prompt
        assert "Salud: good (82%)" in prompt

    async def test_care_season_override_from_context(self, settings):
        gateway = FakeInferenceGateway({"care": CARE_DATA})
        agent = CareRecommendationAgent.from_settings(gateway, settings, today=lambda: date(2024, 1, 10))
        context = AnalysisContext(seasonal_context={"season": "primavera"})
        await agent.analyze(SPECIES_DATA, HEALTH_DATA, context)

        assert "Estación: primavera" in gateway.requests[0].messages[0].content

    async def test_personality_has_default_reasoning(self, settings):
        gateway = FakeInferenceGateway({"personality": PERSONALITY_DATA})
        response = await PersonalityAgent.from_settings(gateway, settings).analyze(SPECIES_DATA, HEALTH_DATA)

        assert response.success is True
        assert response.reasoning == "Personality profile created"
        assert gateway.requests[0].temperature == 0.8
        assert gateway.requests[0].max_tokens == 200

    async def test_out_of_range_confidence_is_clamped(self, settings):
        gateway = FakeInferenceGateway({"species": {**SPECIES_DATA, "confidence": 140}})
        response = await SpeciesIdentificationAgent.from_settings(gateway, settings).analyze(IMAGE_URL)

        assert response.confidence == 100

    async def test_missing_confidence_is_zero(self, settings):
        data = {key: value for key, value in SPECIES_DATA.items() if key != "confidence"}
        gateway = FakeInferenceGateway({"species": data})
        response = await SpeciesIdentificationAgent.from_settings(gateway, settings).analyze(IMAGE_URL)

        assert response.success is True
        assert response.confidence == 0


class TestParseJsonObject:
    def test_object(self):
        assert parse_json_object('{"a": 1}', "test") == {"a": 1}

    @pytest.mark.parametrize("content", [None, "", "   ", "not json", "[]", "42"])
    def test_rejects(self, content):
        with pytest.raises(AIResponseFormatError):
            parse_json_object(content, "test")

    def test_non_finite_numbers_become_none(self):
        parsed = parse_json_object('{"a": 1e400, "b": -1e400, "c": NaN, "d": Infinity, "e": 2.5}', "test")

        assert parsed == {"a": None, "b": None, "c": None, "d": None, "e": 2.5}


def test_nan_confidence_is_zero():
    assert AgentResponse.ok(data={}, confidence=float("nan"), reasoning="ok", cost=1).confidence == 0
    assert AgentResponse.ok(data={}, confidence=10 ** 400, reasoning="ok", cost=1).confidence == 0
