# 📄 File: app/modules/plant_ai/domain/services/agent_system.py
# 🧭 Purpose (Layman Explanation):
# The team leader: it asks the species expert first, then the plant doctor, then the care
# planner and the personality writer together, and merges everything into one plant record.
# 🧪 Purpose (Technical Summary):
# Coordinator building the species -> health -> {care, personality} stage graph, executing
# it, synthesizing the envelopes and producing the AnalysisOutcome with cost and summary.
# 🔗 Dependencies:
# agents, stage_graph.py, synthesis.py, app.shared.utils.logging, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.ai (POST /api/v1/ai/analysis)

import time
from typing import Mapping, Optional

from app.shared.config.settings import Settings, get_settings
from app.shared.utils.logging import get_logger

from ..agents.care_agent import CareRecommendationAgent
from ..agents.health_agent import HealthDiagnosisAgent
from ..agents.personality_agent import PersonalityAgent
from ..agents.species_agent import SpeciesIdentificationAgent
from ..gateways.inference_gateway import InferenceGateway
from ..models.agent_response import AgentResponse
from ..models.analysis import AnalysisContext, AnalysisOutcome
from .stage_graph import Stage, StageGraph, StageRun
from .synthesis import synthesize

logger = get_logger(__name__)


def _upstream_data(upstream: Mapping[str, AgentResponse], key: str):
    response = upstream.get(key)
    if response is None or not response.success:
        return None
    return response.data


class PlantAIAgentSystem:
    """
    Multi-agent plant analysis coordinator.

    Agents are built from settings unless supplied explicitly. The coordinator
    holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        inference: InferenceGateway,
        settings: Optional[Settings] = None,
        species_agent: Optional[SpeciesIdentificationAgent] = None,
        health_agent: Optional[HealthDiagnosisAgent] = None,
        care_agent: Optional[CareRecommendationAgent] = None,
        personality_agent: Optional[PersonalityAgent] = None
    ):
        settings = settings or get_settings()
        self.inference = inference
        self.species_agent = species_agent or SpeciesIdentificationAgent.from_settings(inference, settings)
        self.health_agent = health_agent or HealthDiagnosisAgent.from_settings(inference, settings)
        self.care_agent = care_agent or CareRecommendationAgent.from_settings(inference, settings)
        self.personality_agent = personality_agent or PersonalityAgent.from_settings(inference, settings)

    def build_graph(self, image_url: str, context: Optional[AnalysisContext]) -> StageGraph:
        async def run_species(upstream: Mapping[str, AgentResponse]) -> AgentResponse:
            return await self.species_agent.analyze(image_url)

        async def run_health(upstream: Mapping[str, AgentResponse]) -> AgentResponse:
            species = upstream["species"]
            if not species.success:
                logger.warning(
                    "Species identification failed, continuing with limited context",
                    extra={"reason": species.reasoning}
                )
            return await self.health_agent.analyze(image_url, _upstream_data(upstream, "species"))

        async def run_care(upstream: Mapping[str, AgentResponse]) -> AgentResponse:
            return await self.care_agent.analyze(
                _upstream_data(upstream, "species"),
                _upstream_data(upstream, "health"),
                context
            )

        async def run_personality(upstream: Mapping[str, AgentResponse]) -> AgentResponse:
            return await self.personality_agent.analyze(
                _upstream_data(upstream, "species"),
                _upstream_data(upstream, "health")
            )

        return StageGraph([
            Stage("species", run_species),
            Stage("health", run_health, depends_on=("species",)),
            Stage("care", run_care, depends_on=("species", "health")),
            Stage("personality", run_personality, depends_on=("species", "health")),
        ])

    @staticmethod
    def build_summary(run: StageRun, elapsed_ms: int) -> str:
        return (
            f"Análisis multi-agente completado: {run.succeeded}/{len(run.results)} "
            f"agentes exitosos en {elapsed_ms}ms. Costo: {run.cost.tokens} tokens."
        )

    async def analyze_complete(
        self,
        image_url: str,
        context: Optional[AnalysisContext] = None
    ) -> AnalysisOutcome:
        """
        Run the full multi-agent analysis of one plant photo.

        Args:
            image_url: Publicly reachable image URL or data URL
            context: Optional plant data, history and seasonal hints

        Returns:
            AnalysisOutcome; success is False only when the orchestration
            itself broke, individual agent failures are absorbed as defaults
        """
        start_time = time.time()
        logger.info("Starting multi-agent analysis", extra={"has_context": context is not None})

        try:
            # 1. Run the stage graph
            run = await self.build_graph(image_url, context).execute()

            # 2. Merge envelopes into the plant record
            data = synthesize(run.results)
        except Exception as e:
            logger.error(f"Multi-agent analysis failed: {e}", extra={"error_type": type(e).__name__})
            return AnalysisOutcome(
                success=False,
                data=None,
                total_cost=0,
                agent_results={},
                summary=f"Error en análisis multi-agente: {e}",
            )

        # 3. Summarize
        elapsed_ms = int((time.time() - start_time) * 1000)
        summary = self.build_summary(run, elapsed_ms)
        logger.info(
            summary,
            extra={
                "agents_succeeded": run.succeeded,
                "total_agents": len(run.results),
                "total_tokens": run.cost.tokens,
                "duration_ms": elapsed_ms,
            }
        )

        return AnalysisOutcome(
            success=True,
            data=data,
            total_cost=run.cost.tokens,
            agent_results=run.results,
            summary=summary,
        )
