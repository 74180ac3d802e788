# 📄 File: app/shared/infrastructure/external_apis/__init__.py

# 🧭 Purpose (Layman Explanation):
# The foundation for talking to outside services (today, the OpenAI API) in a reliable way.

# 🧪 Purpose (Technical Summary):
# Initializes external API infrastructure: the aiohttp APIClient with status mapping,
# optional tenacity retry, statistics and error history.

# 🔗 Dependencies:
# - api_client: Generic HTTP client with retry logic

# 🔄 Connected Modules / Calls From:
# Used by: app.modules.plant_ai.infrastructure.external.openai_client

"""
External APIs Infrastructure Module

Key Features:
- Status code to exception mapping
- Optional retry with jittered exponential backoff
- Request statistics and recent error history
"""

from .api_client import RETRYABLE_EXCEPTIONS, APIClient

__all__ = [
    "APIClient",
    "RETRYABLE_EXCEPTIONS",
]
