"""
Domain-specific errors for the finance bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class FinanceDomainError(Exception):
    """Base error for all finance domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class PersonNonexistentOrInactiveError(FinanceDomainError):
    """Raised when an entry references a person that is missing or inactive."""

    def __init__(self, person_id: int) -> None:
        super().__init__(f"Person {person_id} does not exist or is inactive")
        self.person_id = person_id
