"""
Use case: Look up a financial entry by ID.

Failure cases: NoResultFound when the entry does not exist.
"""

from app.application.finance.dtos import EntryResult
from app.domain.finance.ports import EntryRepository


class GetEntryUseCase:
    """Returns a single stored entry."""

    def __init__(self, entry_repo: EntryRepository) -> None:
        self._entry_repo = entry_repo

    def execute(self, entry_id: int) -> EntryResult:
        entry = self._entry_repo.get_by_id(entry_id)
        return EntryResult(
            id=entry.id,
            description=entry.description,
            amount=entry.amount,
            due_date=entry.due_date,
            person_id=entry.person_id,
        )
