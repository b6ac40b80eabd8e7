"""
Infrastructure adapters for the error pages bounded context.
"""
