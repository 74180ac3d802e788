"""
Plant AI domain layer: models, agents, orchestration services and gateways.
"""
