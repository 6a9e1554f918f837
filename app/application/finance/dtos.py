"""
Data Transfer Objects for the finance application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class CreatePersonCommand:
    """Input DTO for registering a person.

    Attributes:
        name: Display name.
        active: Whether the person may receive entries right away.
    """

    name: str
    active: bool = True


@dataclass(frozen=True)
class SetPersonActiveCommand:
    """Input DTO for switching a person's active flag."""

    person_id: int
    active: bool


@dataclass(frozen=True)
class PersonResult:
    """Output DTO describing a stored person."""

    id: int
    name: str
    active: bool


@dataclass(frozen=True)
class CreateEntryCommand:
    """Input DTO for registering a financial entry.

    Attributes:
        description: Short free-text description.
        amount: Positive monetary amount.
        due_date: Date the entry is due.
        person_id: Owner of the entry. Must be an existing, active person.
    """

    description: str
    amount: Decimal
    due_date: date
    person_id: int


@dataclass(frozen=True)
class EntryResult:
    """Output DTO describing a stored financial entry."""

    id: int
    description: str
    amount: Decimal
    due_date: date
    person_id: int
