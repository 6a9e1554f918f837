"""
Use case: Remove a financial entry.

Failure cases: NoResultFound when the entry does not exist.
"""

import logging

from app.domain.finance.ports import EntryRepository

logger = logging.getLogger(__name__)


class DeleteEntryUseCase:
    """Deletes a stored entry."""

    def __init__(self, entry_repo: EntryRepository) -> None:
        self._entry_repo = entry_repo

    def execute(self, entry_id: int) -> None:
        logger.info("Deleting entry id=%s", entry_id)
        self._entry_repo.delete(entry_id)
