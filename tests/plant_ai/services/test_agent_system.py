import asyncio
from datetime import date

import pytest

from app.modules.plant_ai.domain.agents import CareRecommendationAgent
from app.modules.plant_ai.domain.models import AnalysisContext
from app.modules.plant_ai.domain.services import agent_system as agent_system_module
from app.modules.plant_ai.domain.services.agent_system import PlantAIAgentSystem
from app.shared.core.exceptions import APITimeoutError
from tests.fakes import ALL_AGENTS_OK, HEALTH_DATA, SPECIES_DATA, FakeInferenceGateway, delayed


@pytest.fixture
def system_for(settings):
    def build(gateway):
        return PlantAIAgentSystem(gateway, settings=settings)
    return build


class TestAnalyzeComplete:
    async def test_all_agents_succeed(self, system_for, image_url):
        gateway = FakeInferenceGateway(ALL_AGENTS_OK, tokens=100)
        outcome = await system_for(gateway).analyze_complete(image_url)

        assert outcome.success is True
        assert outcome.total_cost == 400
        assert list(outcome.agent_results) == ["species", "health", "care", "personality"]
        assert outcome.data.confidence == 75
        assert outcome.data.analysis.agent_success == 4
        assert outcome.summary.startswith("Análisis multi-agente completado: 4/4 agentes exitosos en ")
        assert outcome.summary.endswith("Costo: 400 tokens.")

    async def test_call_order(self, system_for, image_url):
        gateway = FakeInferenceGateway(ALL_AGENTS_OK)
        await system_for(gateway).analyze_complete(image_url)

        events = gateway.events
        assert events[:4] == [("start", "species"), ("end", "species"), ("start", "health"), ("end", "health")]
        assert sorted(events[4:]) == sorted([
            ("start", "care"), ("end", "care"), ("start", "personality"), ("end", "personality")
        ])

    async def test_care_and_personality_overlap(self, system_for, image_url):
        replies = dict(ALL_AGENTS_OK)
        replies["care"] = lambda request: delayed(ALL_AGENTS_OK["care"], 0.02)
        replies["personality"] = lambda request: delayed(ALL_AGENTS_OK["personality"], 0.02)
        gateway = FakeInferenceGateway(replies)

        await system_for(gateway).analyze_complete(image_url)

        assert [kind for kind, _ in gateway.events[4:]] == ["start", "start", "end", "end"]

    async def test_downstream_agents_receive_upstream_data(self, system_for, image_url):
        gateway = FakeInferenceGateway(ALL_AGENTS_OK)
        await system_for(gateway).analyze_complete(image_url)

        health_prompt = gateway.requests_for("health")[0].messages[0].content
        care_prompt = gateway.requests_for("care")[0].messages[0].content
        personality_prompt = gateway.requests_for("personality")[0].messages[0].content
        assert SPECIES_DATA["species"] in health_prompt
        assert f"Salud: {HEALTH_DATA['overallHealth']} (82%)" in care_prompt
        assert "Especie: Monstera deliciosa" in personality_prompt

    async def test_image_goes_only_to_vision_agents(self, system_for, image_url):
        gateway = FakeInferenceGateway(ALL_AGENTS_OK)
        await system_for(gateway).analyze_complete(image_url)

        with_image = {gateway.calls[i] for i, request in enumerate(gateway.requests) if request.has_image}
        assert with_image == {"species", "health"}

    async def test_species_failure_continues(self, system_for, image_url):
        replies = dict(ALL_AGENTS_OK)
        replies["species"] = APITimeoutError("openai", 45)
        gateway = FakeInferenceGateway(replies)

        outcome = await system_for(gateway).analyze_complete(image_url)

        assert outcome.success is True
        assert outcome.agent_results["species"].success is False
        assert outcome.agent_results["species"].reasoning.startswith("Error en identificación:")
        assert outcome.data.species == "Especie no identificada"
        assert outcome.data.health.health_score == 82
        assert outcome.data.confidence == 70
        assert outcome.total_cost == 300
        assert "Especie no identificada previamente" in gateway.requests_for("health")[0].messages[0].content

    async def test_one_parallel_agent_failing_keeps_the_other(self, system_for, image_url):
        replies = dict(ALL_AGENTS_OK)
        replies["care"] = RuntimeError("network down")
        gateway = FakeInferenceGateway(replies)

        outcome = await system_for(gateway).analyze_complete(image_url)

        assert set(outcome.agent_results) == {"species", "health", "care", "personality"}
        assert outcome.agent_results["care"].success is False
        assert outcome.agent_results["personality"].success is True
        assert outcome.data.care_profile.watering == "semanal"
        assert outcome.data.personality.energy_level == "alta"

    async def test_every_agent_failing_is_still_a_success(self, system_for, image_url):
        gateway = FakeInferenceGateway(default="no soy JSON")
        outcome = await system_for(gateway).analyze_complete(image_url)

        assert outcome.success is True
        assert outcome.total_cost == 0
        assert outcome.data.confidence == 0
        assert outcome.data.analysis.agent_success == 0
        assert outcome.summary.startswith("Análisis multi-agente completado: 0/4")

    async def test_orchestration_failure(self, system_for, image_url, monkeypatch):
        def broken(results):
            raise RuntimeError("synthesis exploded")

        monkeypatch.setattr(agent_system_module, "synthesize", broken)
        gateway = FakeInferenceGateway(ALL_AGENTS_OK)

        outcome = await system_for(gateway).analyze_complete(image_url)

        assert outcome.success is False
        assert outcome.data is None
        assert outcome.total_cost == 0
        assert outcome.agent_results == {}
        assert outcome.summary == "Error en análisis multi-agente: synthesis exploded"

    async def test_context_reaches_care_agent(self, settings, image_url):
        gateway = FakeInferenceGateway(ALL_AGENTS_OK)
        care_agent = CareRecommendationAgent.from_settings(gateway, settings, today=lambda: date(2024, 10, 1))
        system = PlantAIAgentSystem(gateway, settings=settings, care_agent=care_agent)

        await system.analyze_complete(image_url, AnalysisContext(seasonal_context={"season": "verano"}))
        assert "Estación: verano" in gateway.requests_for("care")[0].messages[0].content

        await system.analyze_complete(image_url)
        assert "Estación: otoño" in gateway.requests_for("care")[1].messages[0].content

    async def test_concurrent_analyses_do_not_share_state(self, system_for, image_url):
        gateway = FakeInferenceGateway(ALL_AGENTS_OK)
        system = system_for(gateway)

        first, second = await asyncio.gather(
            system.analyze_complete(image_url),
            system.analyze_complete("https://example.com/ficus.jpg"),
        )

        assert first.total_cost == second.total_cost == 400
        assert len(gateway.requests) == 8

    async def test_overflowing_number_from_one_agent_is_not_fatal(self, system_for, image_url):
        replies = dict(ALL_AGENTS_OK)
        replies["health"] = '{"overallHealth": "good", "healthScore": 1e400, "confidence": 80}'
        gateway = FakeInferenceGateway(replies)

        outcome = await system_for(gateway).analyze_complete(image_url)

        assert outcome.success is True
        assert outcome.data.health.overall_health == "good"
        assert outcome.data.health.health_score == 50
        assert outcome.data.species == "Monstera deliciosa"
        assert outcome.data.analysis.agent_success == 4
