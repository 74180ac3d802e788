"""
Plant AI domain services.

Import the concrete modules directly (e.g. ``services.agent_system``);
this package stays import-free because the agents depend on
``services.seasons``.
"""
