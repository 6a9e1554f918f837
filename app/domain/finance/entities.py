"""
Domain entities for the finance bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Person:
    """Someone who owns financial entries.

    Attributes:
        id: Storage identifier. None until persisted.
        name: Display name.
        active: Inactive people keep their history but cannot
            receive new entries.
    """

    id: int | None
    name: str
    active: bool = True

    def can_receive_entries(self) -> bool:
        """Return True if new entries may be registered for this person."""
        return self.active


@dataclass(frozen=True)
class Entry:
    """A single financial entry (income or expense) owned by a person."""

    id: int | None
    description: str
    amount: Decimal
    due_date: date
    person_id: int
