"""
HTTP interface for the finance bounded context.
"""
