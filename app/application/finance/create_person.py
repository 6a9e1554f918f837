"""
Use case: Register a person.

Input: CreatePersonCommand (name, active)
Output: PersonResult
Side effects: Inserts a row into the people table.
"""

import logging

from app.application.finance.dtos import CreatePersonCommand, PersonResult
from app.domain.finance.entities import Person
from app.domain.finance.ports import PersonRepository

logger = logging.getLogger(__name__)


class CreatePersonUseCase:
    """Persists a new person."""

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def execute(self, command: CreatePersonCommand) -> PersonResult:
        """Run the create-person use case.

        Args:
            command: Name and initial active flag of the person.

        Returns:
            The stored person with its assigned ID.
        """
        logger.info("Registering person name=%s", command.name)
        person = self._person_repo.add(
            Person(id=None, name=command.name, active=command.active)
        )
        return PersonResult(id=person.id, name=person.name, active=person.active)
