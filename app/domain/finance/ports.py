"""
Port interfaces (ABCs) for the finance bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.finance.entities import Entry, Person


class PersonRepository(ABC):
    """Port for persisting and retrieving people."""

    @abstractmethod
    def add(self, person: Person) -> Person:
        """Persist a new person and return it with its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, person_id: int) -> Optional[Person]:
        """Return a person by ID, or None if there is no such person."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, person_id: int) -> Person:
        """Return a person by ID.

        Raises:
            sqlalchemy.exc.NoResultFound: If the person does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def set_active(self, person_id: int, active: bool) -> None:
        """Update the active flag of an existing person.

        Raises:
            sqlalchemy.exc.NoResultFound: If the person does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, person_id: int) -> None:
        """Delete an existing person.

        Raises:
            sqlalchemy.exc.NoResultFound: If the person does not exist.
            sqlalchemy.exc.IntegrityError: If entries still reference the person.
        """
        raise NotImplementedError


class EntryRepository(ABC):
    """Port for persisting and retrieving financial entries."""

    @abstractmethod
    def add(self, entry: Entry) -> Entry:
        """Persist a new entry and return it with its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, entry_id: int) -> Entry:
        """Return an entry by ID.

        Raises:
            sqlalchemy.exc.NoResultFound: If the entry does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, entry_id: int) -> None:
        """Delete an existing entry.

        Raises:
            sqlalchemy.exc.NoResultFound: If the entry does not exist.
        """
        raise NotImplementedError
