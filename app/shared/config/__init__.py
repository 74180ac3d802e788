# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the plant AI service which models to call,
# how long to wait for them and how chatty the logs should be.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - All modules requiring configuration

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Inference API credentials and endpoint
- Per-agent model, token budget and temperature
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
