# 📄 File: app/modules/plant_ai/domain/services/seasons.py
# 🧭 Purpose (Layman Explanation):
# Works out which season it is (northern hemisphere) so care tips fit the time of year.
# 🧪 Purpose (Technical Summary):
# Month to Spanish season name mapping, with an optional override from the request context.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# agents.care_agent

from typing import Any, Dict, Optional

SEASONS = ("primavera", "verano", "otoño", "invierno")


def current_season(month: int) -> str:
    """Season for a 1-12 month: Mar-May spring, Jun-Aug summer, Sep-Nov autumn, else winter."""
    if 3 <= month <= 5:
        return "primavera"
    if 6 <= month <= 8:
        return "verano"
    if 9 <= month <= 11:
        return "otoño"
    return "invierno"


def resolve_season(seasonal_context: Optional[Dict[str, Any]], month: int) -> str:
    if seasonal_context:
        season = seasonal_context.get("season")
        if isinstance(season, str) and season.strip():
            return season.strip()
    return current_season(month)
