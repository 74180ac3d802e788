import asyncio

import pytest

from app.modules.plant_ai.domain.models import AgentResponse
from app.modules.plant_ai.domain.services.stage_graph import Stage, StageGraph
from app.shared.core.exceptions import StageGraphError


def returning(response, log=None, name=None, delay=0):
    async def run(upstream):
        if log is not None:
            log.append(("start", name, sorted(upstream)))
        if delay:
            await asyncio.sleep(delay)
        if log is not None:
            log.append(("end", name))
        return response
    return run


OK = AgentResponse.ok(data={"x": 1}, confidence=50, reasoning="ok", cost=10)


class TestValidation:
    def test_waves_follow_dependencies(self):
        graph = StageGraph([
            Stage("a", returning(OK)),
            Stage("b", returning(OK), depends_on=("a",)),
            Stage("c", returning(OK), depends_on=("a", "b")),
            Stage("d", returning(OK), depends_on=("a", "b")),
        ])
        assert graph.waves() == [["a"], ["b"], ["c", "d"]]

    def test_independent_stages_share_a_wave(self):
        graph = StageGraph([Stage("a", returning(OK)), Stage("b", returning(OK))])
        assert graph.waves() == [["a", "b"]]

    def test_duplicate_names(self):
        with pytest.raises(StageGraphError, match="Duplicate stage names: a"):
            StageGraph([Stage("a", returning(OK)), Stage("a", returning(OK))])

    def test_unknown_dependency(self):
        with pytest.raises(StageGraphError, match="unknown stages: ghost"):
            StageGraph([Stage("a", returning(OK), depends_on=("ghost",))])

    def test_cycle(self):
        with pytest.raises(StageGraphError, match="Dependency cycle"):
            StageGraph([
                Stage("a", returning(OK), depends_on=("b",)),
                Stage("b", returning(OK), depends_on=("a",)),
            ])

    def test_error_code(self):
        with pytest.raises(StageGraphError) as exc_info:
            StageGraph([Stage("a", returning(OK), depends_on=("a",))])
        assert exc_info.value.error_code == "STAGE_GRAPH_ERROR"


class TestExecute:
    async def test_downstream_waits_for_whole_wave(self):
        log = []
        graph = StageGraph([
            Stage("a", returning(OK, log, "a", delay=0.02)),
            Stage("b", returning(OK, log, "b")),
            Stage("c", returning(OK, log, "c"), depends_on=("a", "b")),
        ])

        await graph.execute()

        start_c = log.index(("start", "c", ["a", "b"]))
        assert log.index(("end", "a")) < start_c
        assert log.index(("end", "b")) < start_c

    async def test_same_wave_runs_concurrently(self):
        log = []
        graph = StageGraph([
            Stage("a", returning(OK, log, "a", delay=0.02)),
            Stage("b", returning(OK, log, "b", delay=0.02)),
        ])

        await graph.execute()

        assert [entry[0] for entry in log] == ["start", "start", "end", "end"]

    async def test_upstream_results_are_passed(self):
        seen = {}

        async def downstream(upstream):
            seen.update(upstream)
            return OK

        graph = StageGraph([
            Stage("a", returning(OK)),
            Stage("b", downstream, depends_on=("a",)),
        ])
        await graph.execute()

        assert seen == {"a": OK}

    async def test_raising_stage_becomes_failed_envelope(self):
        async def boom(upstream):
            raise RuntimeError("kaput")

        graph = StageGraph([
            Stage("a", boom),
            Stage("b", returning(OK), depends_on=("a",)),
        ])
        run = await graph.execute()

        assert run.results["a"].success is False
        assert run.results["a"].reasoning == "Error en etapa a: kaput"
        assert run.results["b"] is OK
        assert run.succeeded == 1

    async def test_sibling_failure_does_not_drop_other_result(self):
        async def boom(upstream):
            raise ValueError("bad")

        graph = StageGraph([
            Stage("a", returning(OK)),
            Stage("b", boom, depends_on=("a",)),
            Stage("c", returning(OK, delay=0.01), depends_on=("a",)),
        ])
        run = await graph.execute()

        assert list(run.results) == ["a", "b", "c"]
        assert run.results["c"].success is True

    async def test_cost_is_accumulated(self):
        graph = StageGraph([
            Stage("a", returning(OK)),
            Stage("b", returning(AgentResponse.failed("nope")), depends_on=("a",)),
            Stage("c", returning(OK), depends_on=("a",)),
        ])
        run = await graph.execute()

        assert run.cost.tokens == 20
        assert run.cost.calls == 3

    async def test_results_follow_declaration_order(self):
        graph = StageGraph([
            Stage("late", returning(OK), depends_on=("early",)),
            Stage("early", returning(OK)),
        ])
        run = await graph.execute()

        assert list(run.results) == ["late", "early"]
