"""
Use case: Register a financial entry for a person.

Input: CreateEntryCommand (description, amount, due_date, person_id)
Output: EntryResult
Side effects: Inserts a row into the entries table.
Failure cases: PersonNonexistentOrInactiveError.
"""

import logging

from app.application.finance.dtos import CreateEntryCommand, EntryResult
from app.domain.finance.entities import Entry
from app.domain.finance.errors import PersonNonexistentOrInactiveError
from app.domain.finance.ports import EntryRepository, PersonRepository

logger = logging.getLogger(__name__)


class CreateEntryUseCase:
    """Orchestrates registering an entry.

    Verifies the owning person exists and is active before
    delegating to the EntryRepository.
    """

    def __init__(
        self,
        person_repo: PersonRepository,
        entry_repo: EntryRepository,
    ) -> None:
        self._person_repo = person_repo
        self._entry_repo = entry_repo

    def execute(self, command: CreateEntryCommand) -> EntryResult:
        """Run the create-entry use case.

        Args:
            command: The entry to register.

        Returns:
            The stored entry with its assigned ID.

        Raises:
            PersonNonexistentOrInactiveError: If the person is missing or inactive.
        """
        logger.info(
            "Registering entry for person=%s, amount=%s",
            command.person_id,
            command.amount,
        )

        person = self._person_repo.find_by_id(command.person_id)
        if person is None or not person.can_receive_entries():
            raise PersonNonexistentOrInactiveError(command.person_id)

        entry = self._entry_repo.add(
            Entry(
                id=None,
                description=command.description,
                amount=command.amount,
                due_date=command.due_date,
                person_id=command.person_id,
            )
        )
        return EntryResult(
            id=entry.id,
            description=entry.description,
            amount=entry.amount,
            due_date=entry.due_date,
            person_id=entry.person_id,
        )
