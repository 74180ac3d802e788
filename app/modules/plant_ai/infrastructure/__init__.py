"""
Plant AI infrastructure layer.
"""
