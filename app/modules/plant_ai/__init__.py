# 📄 File: app/modules/plant_ai/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the plant AI system: the photo analysis team, the talking-plant chat, the garden
# consultant, the quick insights and the photo check-ups.
# 🧪 Purpose (Technical Summary):
# Package initialization for the plant AI module (domain-driven layout: domain agents and
# services, infrastructure OpenAI gateway, presentation FastAPI routes).
# 🔗 Dependencies:
# FastAPI, pydantic, aiohttp, tenacity, app.shared.*
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router

"""
Plant AI Module

This module handles all AI functionality:
- Multi-agent plant analysis (species, health, care, personality)
- Persona chat with a single plant, with emotion tagging
- Garden-wide consultation with graceful fallback
- Short per-plant insights
- Progress comparison between two photos and health re-diagnosis from a new one

Architecture follows Domain-Driven Design:
- Domain: Models, agents, orchestration services and the inference gateway interface
- Infrastructure: OpenAI chat-completions client
- Presentation: API endpoints, request/response schemas and dependency providers
"""

from typing import Any, Dict

__version__ = "1.0.0"
__module_name__ = "plant_ai"
__description__ = "Multi-agent plant analysis and plant chat"

PLANT_AI_CONFIG = {
    "version": __version__,
    "module_name": __module_name__,
    "description": __description__,
    "agents": ["species", "health", "care", "personality"],
    "stages": {
        "species": [],
        "health": ["species"],
        "care": ["species", "health"],
        "personality": ["species", "health"],
    },
    "features": ["analysis", "chat", "garden_chat", "insights", "progress", "health_diagnosis"],
}


def get_module_info() -> Dict[str, Any]:
    """
    Get basic module information.

    Returns:
        Module information dictionary
    """
    return {
        "name": __module_name__,
        "version": __version__,
        "description": __description__,
        "agents": list(PLANT_AI_CONFIG["agents"]),
        "features": list(PLANT_AI_CONFIG["features"]),
    }


__all__ = [
    "__version__",
    "__module_name__",
    "__description__",
    "PLANT_AI_CONFIG",
    "get_module_info",
]
