"""
Adapter: Person repository.

Implements PersonRepository port on top of the people table.
Missing rows surface as NoResultFound; constraint failures as
IntegrityError. Both are translated to HTTP responses by the
shared error handlers.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection, Engine

from app.domain.finance.entities import Person
from app.domain.finance.ports import PersonRepository
from app.infrastructure.database import people

logger = logging.getLogger(__name__)


class PersonRepositoryAdapter(PersonRepository):
    """Reads and writes people through a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, person: Person) -> Person:
        """Insert a person and return it with the generated ID."""
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(people).values(name=person.name, active=person.active)
            )
            person_id = result.inserted_primary_key[0]
        logger.info("Created person id=%s.", person_id)
        return Person(id=person_id, name=person.name, active=person.active)

    def find_by_id(self, person_id: int) -> Optional[Person]:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(people).where(people.c.id == person_id)
            ).one_or_none()
        return _to_person(row) if row is not None else None

    def get_by_id(self, person_id: int) -> Person:
        with self._engine.connect() as conn:
            row = conn.execute(select(people).where(people.c.id == person_id)).one()
        return _to_person(row)

    def set_active(self, person_id: int, active: bool) -> None:
        with self._engine.begin() as conn:
            _require_person(conn, person_id)
            conn.execute(
                update(people).where(people.c.id == person_id).values(active=active)
            )
        logger.info("Person id=%s active=%s.", person_id, active)

    def delete(self, person_id: int) -> None:
        with self._engine.begin() as conn:
            _require_person(conn, person_id)
            conn.execute(delete(people).where(people.c.id == person_id))
        logger.info("Deleted person id=%s.", person_id)


def _require_person(conn: Connection, person_id: int) -> None:
    # .one() raises NoResultFound for unknown IDs
    conn.execute(select(people.c.id).where(people.c.id == person_id)).one()


def _to_person(row) -> Person:
    return Person(id=row.id, name=row.name, active=bool(row.active))
