"""
Use case: Activate or deactivate a person.

Input: SetPersonActiveCommand (person_id, active)
Output: None
Side effects: Updates the person's active flag.
Failure cases: NoResultFound when the person does not exist.
"""

import logging

from app.application.finance.dtos import SetPersonActiveCommand
from app.domain.finance.ports import PersonRepository

logger = logging.getLogger(__name__)


class SetPersonActiveUseCase:
    """Switches the active flag of an existing person."""

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def execute(self, command: SetPersonActiveCommand) -> None:
        logger.info(
            "Setting person id=%s active=%s", command.person_id, command.active
        )
        self._person_repo.set_active(command.person_id, command.active)
