"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error normalization and handler registration
- Localized message catalogs and locale negotiation
- Security middleware
- Rate limiting
- Logging configuration
"""
