"""
Pydantic schemas for finance API request/response validation.

These schemas enforce input validation and define the API contract.
Constraint violations surface as field validation errors with one
localized message per invalid field.
No business logic belongs here.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, RootModel

NAME_MIN_LEN = 3
NAME_MAX_LEN = 50
DESCRIPTION_MIN_LEN = 5
DESCRIPTION_MAX_LEN = 50


class ErrorMessage(BaseModel):
    """One entry of an error response body."""

    userMessage: str = Field(..., description="Localized message for end users")
    developerMessage: str = Field(..., description="Technical diagnostic detail")


class ErrorResponse(RootModel[list[ErrorMessage]]):
    """Error response body: one entry per error, never empty."""


class CreatePersonRequest(BaseModel):
    """Request schema for registering a person.

    Attributes:
        name: Display name (3-50 chars).
        active: Whether the person may receive entries.
    """

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    active: bool = True


class SetActiveRequest(BaseModel):
    """Request schema for switching a person's active flag."""

    active: bool


class PersonResponse(BaseModel):
    """Response schema for a stored person."""

    id: int
    name: str
    active: bool


class CreateEntryRequest(BaseModel):
    """Request schema for registering a financial entry.

    Attributes:
        description: Short description (5-50 chars).
        amount: Positive amount with at most two decimal places.
        due_date: Date the entry is due.
        person_id: ID of an existing, active person.
    """

    description: str = Field(
        ..., min_length=DESCRIPTION_MIN_LEN, max_length=DESCRIPTION_MAX_LEN
    )
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    due_date: date
    person_id: int = Field(..., ge=1)


class EntryResponse(BaseModel):
    """Response schema for a stored financial entry."""

    id: int
    description: str
    amount: Decimal
    due_date: date
    person_id: int


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    locales: list[str]
