"""
Use case: Remove a person.

Input: person ID
Output: None
Side effects: Deletes the person row.
Failure cases: NoResultFound when the person does not exist,
IntegrityError when entries still reference the person.
"""

import logging

from app.domain.finance.ports import PersonRepository

logger = logging.getLogger(__name__)


class DeletePersonUseCase:
    """Deletes a person that owns no entries."""

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def execute(self, person_id: int) -> None:
        logger.info("Deleting person id=%s", person_id)
        self._person_repo.delete(person_id)
