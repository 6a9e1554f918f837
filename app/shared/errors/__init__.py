"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that storage, validation and
domain errors are consistently translated into localized API responses.
"""
