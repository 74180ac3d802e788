"""
Infrastructure layer package for the Plantitas AI service.
Provides the shared HTTP client for external APIs.
"""

__all__ = []
