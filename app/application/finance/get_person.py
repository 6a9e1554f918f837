"""
Use case: Look up a person by ID.

Input: person ID
Output: PersonResult
Failure cases: NoResultFound when the person does not exist.
"""

from app.application.finance.dtos import PersonResult
from app.domain.finance.ports import PersonRepository


class GetPersonUseCase:
    """Returns a single stored person."""

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def execute(self, person_id: int) -> PersonResult:
        person = self._person_repo.get_by_id(person_id)
        return PersonResult(id=person.id, name=person.name, active=person.active)
