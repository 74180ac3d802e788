# 📄 File: app/modules/plant_ai/domain/services/stage_graph.py
# 🧭 Purpose (Layman Explanation):
# A small to-do planner for the AI helpers: it knows who has to wait for whom, runs
# everyone who is ready at the same time, and keeps a running tally of tokens spent.
# 🧪 Purpose (Technical Summary):
# Explicit DAG of named async stages. Validates names/dependencies/cycles, groups stages
# into topological waves, runs each wave with asyncio.gather as a strict barrier and
# turns escaped exceptions into failed AgentResponse envelopes.
# 🔗 Dependencies:
# asyncio, dataclasses, app.shared.core.exceptions, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# agent_system.py

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Mapping, Sequence, Tuple

from app.shared.core.exceptions import StageGraphError
from app.shared.utils.logging import get_logger

from ..models.agent_response import AgentResponse, CostLedger

logger = get_logger(__name__)

StageRunner = Callable[[Mapping[str, AgentResponse]], Awaitable[AgentResponse]]


@dataclass(frozen=True)
class Stage:
    """
    One named unit of work.

    ``run`` receives the envelopes of the stages listed in ``depends_on``.
    """
    name: str
    run: StageRunner
    depends_on: Tuple[str, ...] = ()


@dataclass(frozen=True)
class StageRun:
    results: Dict[str, AgentResponse] = field(default_factory=dict)
    cost: CostLedger = field(default_factory=CostLedger)

    @property
    def succeeded(self) -> int:
        return sum(1 for response in self.results.values() if response.success)


class StageGraph:
    """Dependency graph executed wave by wave."""

    def __init__(self, stages: Sequence[Stage]):
        self.stages: List[Stage] = list(stages)
        self._validate()
        self._waves = self._compute_waves()

    def _validate(self) -> None:
        names = [stage.name for stage in self.stages]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise StageGraphError(
                f"Duplicate stage names: {', '.join(duplicates)}",
                details={"duplicates": duplicates}
            )

        known = set(names)
        for stage in self.stages:
            missing = [dep for dep in stage.depends_on if dep not in known]
            if missing:
                raise StageGraphError(
                    f"Stage '{stage.name}' depends on unknown stages: {', '.join(missing)}",
                    details={"stage": stage.name, "missing": missing}
                )

    def _compute_waves(self) -> List[List[Stage]]:
        remaining = list(self.stages)
        done: set = set()
        waves: List[List[Stage]] = []

        while remaining:
            ready = [stage for stage in remaining if all(dep in done for dep in stage.depends_on)]
            if not ready:
                cycle = [stage.name for stage in remaining]
                raise StageGraphError(
                    f"Dependency cycle between stages: {', '.join(cycle)}",
                    details={"stages": cycle}
                )
            waves.append(ready)
            done.update(stage.name for stage in ready)
            remaining = [stage for stage in remaining if stage.name not in done]

        return waves

    def waves(self) -> List[List[str]]:
        return [[stage.name for stage in wave] for wave in self._waves]

    async def _run_stage(self, stage: Stage, results: Mapping[str, AgentResponse]) -> AgentResponse:
        upstream = {dep: results[dep] for dep in stage.depends_on}
        return await stage.run(upstream)

    async def execute(self) -> StageRun:
        """
        Run every stage once.

        Stages in the same wave run concurrently; a wave starts only after the
        previous one has fully completed. A stage that raises still yields a
        failed envelope so downstream stages and the caller see every result.
        """
        results: Dict[str, AgentResponse] = {}
        ledger = CostLedger()

        for wave in self._waves:
            outcomes = await asyncio.gather(
                *(self._run_stage(stage, results) for stage in wave),
                return_exceptions=True
            )
            for stage, outcome in zip(wave, outcomes):
                if isinstance(outcome, BaseException):
                    if isinstance(outcome, asyncio.CancelledError):
                        raise outcome
                    logger.warning(
                        f"Stage '{stage.name}' raised {type(outcome).__name__}: {outcome}",
                        extra={"stage": stage.name}
                    )
                    outcome = AgentResponse.failed(f"Error en etapa {stage.name}: {outcome}")
                results[stage.name] = outcome
                ledger = ledger.add(outcome)

        ordered = {stage.name: results[stage.name] for stage in self.stages}
        return StageRun(results=ordered, cost=ledger)
