# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder contains the Plantitas AI service code and records its
# version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata for the
# Plantitas AI FastAPI service.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - Package imports throughout the application

"""
Plantitas AI - Multi-agent plant analysis and plant chat service

Identifies plants from photos, diagnoses their health, writes care plans,
gives each plant a personality and lets users chat with it.
"""

__version__ = "1.0.0"
__title__ = "Plantitas AI API"
__description__ = "Multi-agent plant analysis and plant chat service"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
