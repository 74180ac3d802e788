# 📄 File: app/modules/plant_ai/domain/services/model_selection.py
# 🧭 Purpose (Layman Explanation):
# Knows roughly how much each language model costs and which one is a good fit for a job,
# and can guess how many tokens a prompt will use before we send it.
# 🧪 Purpose (Technical Summary):
# Static model catalogue, task/complexity model matrix, token and USD cost estimation.
# 🔗 Dependencies:
# dataclasses, math, typing
# 🔄 Connected Modules / Calls From:
# garden_advisor.py, infrastructure.external.openai_client (cost logging)

import math
from dataclasses import dataclass
from typing import Dict, List, Literal, Tuple

Complexity = Literal["low", "medium", "high"]
BudgetPriority = Literal["cost", "performance", "balanced"]

DEFAULT_MODEL = "gpt-4o"

# ~4 characters per token for Spanish/English text
CHARS_PER_TOKEN = 4
# average cost of one high-detail image
IMAGE_TOKENS = 765


@dataclass(frozen=True)
class ModelConfig:
    name: str
    cost_per_1k_tokens: float
    max_tokens: int
    suitable_for: Tuple[str, ...]
    complexity_level: Complexity


MODEL_CONFIGURATIONS: Dict[str, ModelConfig] = {
    "gpt-4o-mini": ModelConfig(
        name="gpt-4o-mini",
        cost_per_1k_tokens=0.00015,
        max_tokens=128000,
        suitable_for=("simple_analysis", "basic_chat", "quick_insights"),
        complexity_level="low",
    ),
    "gpt-4o": ModelConfig(
        name="gpt-4o",
        cost_per_1k_tokens=0.0025,
        max_tokens=128000,
        suitable_for=("image_analysis", "complex_chat", "garden_analysis", "health_diagnosis"),
        complexity_level="medium",
    ),
    "o1-mini": ModelConfig(
        name="o1-mini",
        cost_per_1k_tokens=0.003,
        max_tokens=65536,
        suitable_for=("complex_reasoning", "multi_step_analysis", "strategic_planning"),
        complexity_level="high",
    ),
}

TASK_MODEL_MATRIX: Dict[str, Dict[str, List[str]]] = {
    "image_analysis": {"low": ["gpt-4o-mini"], "medium": ["gpt-4o"], "high": ["gpt-4o"]},
    "chat_response": {"low": ["gpt-4o-mini"], "medium": ["gpt-4o-mini", "gpt-4o"], "high": ["gpt-4o"]},
    "garden_analysis": {"low": ["gpt-4o-mini"], "medium": ["gpt-4o"], "high": ["o1-mini", "gpt-4o"]},
    "health_diagnosis": {"low": ["gpt-4o-mini"], "medium": ["gpt-4o"], "high": ["gpt-4o"]},
    "plant_insights": {"low": ["gpt-4o-mini"], "medium": ["gpt-4o-mini", "gpt-4o"], "high": ["gpt-4o"]},
}


def select_optimal_model(
    task: str,
    complexity: Complexity = "medium",
    budget_priority: BudgetPriority = "balanced"
) -> str:
    """
    Pick a model for a task.

    "cost" takes the cheapest candidate, "performance" the last one listed
    (the strongest), "balanced" the middle one. Unknown tasks get gpt-4o.
    """
    candidates = TASK_MODEL_MATRIX.get(task, {}).get(complexity) or [DEFAULT_MODEL]

    if budget_priority == "cost":
        return min(candidates, key=lambda name: MODEL_CONFIGURATIONS[name].cost_per_1k_tokens)
    if budget_priority == "performance":
        return candidates[-1]
    return candidates[len(candidates) // 2]


def estimate_tokens(text: str, include_images: bool = False) -> int:
    text_tokens = math.ceil(len(text) / CHARS_PER_TOKEN)
    return text_tokens + (IMAGE_TOKENS if include_images else 0)


def estimate_cost(tokens: int, model: str) -> float:
    """USD estimate; 0 for models outside the catalogue."""
    config = MODEL_CONFIGURATIONS.get(model)
    if not config:
        return 0.0
    return (tokens / 1000) * config.cost_per_1k_tokens
