"""
Plant AI HTTP API.
"""
