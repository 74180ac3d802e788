# 📄 File: app/modules/plant_ai/domain/models/agent_response.py
# 🧭 Purpose (Layman Explanation):
# Defines the little "report card" every AI helper hands back: did it work, what it found,
# how sure it is, why, and how many tokens it spent.
# 🧪 Purpose (Technical Summary):
# Immutable AgentResponse envelope produced by exactly one agent invocation and consumed
# synchronously by the coordinator, plus the CostLedger accumulator threaded through stages.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# agents, stage_graph.py, agent_system.py, chat_responder.py, presentation schemas

import math
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AgentResponse(BaseModel):
    """
    Result envelope of one agent call.

    A failed envelope always carries confidence 0, cost 0 and no data;
    the reasoning holds a human-readable error summary.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[Dict[str, Any]] = None
    confidence: float = Field(default=0, ge=0, le=100)
    reasoning: str = ""
    cost: int = Field(default=0, ge=0)

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, v: Any) -> float:
        """Models occasionally answer 120 or "85"; keep it in 0-100."""
        try:
            value = float(v)
        except (TypeError, ValueError, OverflowError):
            return 0.0
        if math.isnan(value):
            return 0.0
        return max(0.0, min(100.0, value))

    @classmethod
    def ok(
        cls,
        data: Optional[Dict[str, Any]],
        confidence: Any,
        reasoning: str,
        cost: int
    ) -> "AgentResponse":
        return cls(success=True, data=data, confidence=confidence, reasoning=reasoning, cost=cost)

    @classmethod
    def failed(cls, reasoning: str) -> "AgentResponse":
        return cls(success=False, data=None, confidence=0, reasoning=reasoning, cost=0)


class CostLedger(BaseModel):
    """Token spend accumulated across stages; every add returns a new ledger."""

    model_config = ConfigDict(frozen=True)

    tokens: int = 0
    calls: int = 0

    def add(self, response: AgentResponse) -> "CostLedger":
        return CostLedger(tokens=self.tokens + response.cost, calls=self.calls + 1)
