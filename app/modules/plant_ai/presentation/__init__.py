"""
Plant AI presentation layer: FastAPI routes, schemas and dependency providers.
"""
