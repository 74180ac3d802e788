# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common utilities and tools
# that every part of the Plantitas AI service uses, like settings, logging and errors.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for common utilities, infrastructure,
# and cross-cutting concerns used throughout the Plantitas AI modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities
# - Configuration and infrastructure components
# - Cross-module shared services

"""
Shared Kernel - Common Utilities and Infrastructure

This package contains shared utilities, infrastructure components,
and cross-cutting concerns used throughout the Plantitas AI service:

- Configuration management
- Exception hierarchy
- External HTTP API client
- Logging and monitoring utilities
"""

__all__ = []