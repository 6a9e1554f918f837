"""
HTTP security middleware and rate limiting.
"""
