"""
Infrastructure adapters for the finance bounded context.
"""
