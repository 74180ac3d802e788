# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A toolbox other parts of the service use, mainly for writing useful log lines.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the structured logging helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities (python-json-logger)

# 🔄 Connected Modules / Calls From:
# Used by: All application modules for logging

"""
Shared Utilities Package

- Structured logging with JSON formatting
- Request/correlation context for log lines
- External API and AI operation performance logging
"""

from .logging import (
    StructuredLogger,
    get_logger,
    log_context,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

__all__ = [
    "StructuredLogger",
    "get_logger",
    "log_context",
    "log_shutdown_event",
    "log_startup_event",
    "setup_logging",
]
