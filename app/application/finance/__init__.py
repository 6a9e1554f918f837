"""
Application layer for the finance bounded context.

Use cases coordinate domain entities and ports to fulfill
business operations. No framework imports allowed.
"""
