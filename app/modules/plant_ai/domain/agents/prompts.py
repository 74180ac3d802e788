# 📄 File: app/modules/plant_ai/domain/agents/prompts.py
# 🧭 Purpose (Layman Explanation):
# The exact questions we ask the language model for each job: name the plant, check its health,
# plan its care and invent its personality. Answers must come back as JSON.
# 🧪 Purpose (Technical Summary):
# Centralized Spanish prompt templates and builders for the four analysis agents.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# species_agent.py, health_agent.py, care_agent.py, personality_agent.py

from typing import Any, Dict, Optional

SPECIES_PROMPT = """Como experto botánico, identifica esta planta:

RESPONDE SOLO EN JSON:
{
  "species": "nombre_científico",
  "commonName": "nombre_común",
  "family": "familia_botánica",
  "confidence": número_0_100,
  "reasoning": "explicación_breve_2_líneas",
  "distinguishingFeatures": ["característica1", "característica2"],
  "isIndoor": boolean,
  "rareness": "común|poco_común|raro"
}

Sé preciso. Si no estás seguro, indica menor confidence."""

HEALTH_PROMPT = """Como fitopatólogo, diagnostica la salud de esta planta.

{species_context}

RESPONDE SOLO EN JSON:
{{
  "overallHealth": "excellent|good|fair|poor|critical",
  "healthScore": número_0_100,
  "confidence": número_0_100,
  "symptoms": ["síntoma1", "síntoma2"],
  "diseases": ["enfermedad1"] o [],
  "pests": ["plaga1"] o [],
  "nutritionalIssues": ["deficiencia1"] o [],
  "urgentActions": ["acción1"] o [],
  "reasoning": "diagnóstico_en_2_líneas",
  "prognosis": "recuperación_esperada"
}}

Enfócate en evidencia visual clara."""

CARE_PROMPT = """Como experto en jardinería, crea un plan de cuidados personalizado.

{plant_context}

RESPONDE SOLO EN JSON:
{{
  "careProfile": {{
    "watering": "frecuencia_específica",
    "sunlight": "requerimientos_luz",
    "humidity": "nivel_humedad",
    "temperature": "rango_temperatura",
    "fertilizing": "programa_fertilización"
  }},
  "immediateActions": ["acción1", "acción2"],
  "weeklyRoutine": ["lunes: tarea", "miércoles: tarea"],
  "seasonalTips": ["consejo1", "consejo2"],
  "troubleshooting": {{"problema": "solución"}},
  "confidence": número_0_100,
  "reasoning": "justificación_en_2_líneas"
}}

Sé específico y práctico."""

PERSONALITY_PROMPT = """Crea una personalidad única para esta planta basada en sus características.

Especie: {species}
Salud: {health}
Es rara: {is_rare}

RESPONDE SOLO EN JSON:
{{
  "personality": {{
    "energyLevel": "alta|media|baja",
    "communicationStyle": "alegre|sereno|jugueton|sabio|timido",
    "interests": ["interés1", "interés2"],
    "quirks": ["peculiaridad1"],
    "mood": "actual_mood_based_on_health"
  }},
  "catchphrases": ["frase1", "frase2"],
  "chatStyle": "descripción_de_como_habla",
  "confidence": número_0_100
}}

Hazla única y memorable."""


def build_health_prompt(species_info: Optional[Dict[str, Any]]) -> str:
    if species_info:
        species_context = (
            f"La planta es: {species_info.get('species', 'Desconocida')} "
            f"({species_info.get('commonName', 'Sin nombre')})"
        )
    else:
        species_context = "Especie no identificada previamente"
    return HEALTH_PROMPT.format(species_context=species_context)


def build_care_prompt(
    species_info: Optional[Dict[str, Any]],
    health_info: Optional[Dict[str, Any]],
    season: str
) -> str:
    species_info = species_info or {}
    health_info = health_info or {}
    plant_context = "\n".join([
        f"Planta: {species_info.get('species') or 'Desconocida'} "
        f"({species_info.get('commonName') or 'Sin nombre'})",
        f"Salud: {health_info.get('overallHealth') or 'Desconocida'} "
        f"({health_info.get('healthScore') or 0}%)",
        f"Estación: {season}",
        f"Ambiente: {'Interior' if species_info.get('isIndoor') else 'Exterior'}",
    ])
    return CARE_PROMPT.format(plant_context=plant_context)


def build_personality_prompt(
    species_info: Optional[Dict[str, Any]],
    health_info: Optional[Dict[str, Any]]
) -> str:
    species_info = species_info or {}
    health_info = health_info or {}
    return PERSONALITY_PROMPT.format(
        species=species_info.get("species") or "Desconocida",
        health=health_info.get("overallHealth") or "Desconocida",
        is_rare="sí" if species_info.get("rareness") == "raro" else "no",
    )
