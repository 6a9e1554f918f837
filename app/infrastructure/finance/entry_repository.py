"""
Adapter: Entry repository.

Implements EntryRepository port on top of the entries table.
"""

import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Engine

from app.domain.finance.entities import Entry
from app.domain.finance.ports import EntryRepository
from app.infrastructure.database import entries

logger = logging.getLogger(__name__)


class EntryRepositoryAdapter(EntryRepository):
    """Reads and writes financial entries through a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, entry: Entry) -> Entry:
        """Insert an entry and return it with the generated ID.

        Raises:
            sqlalchemy.exc.IntegrityError: If person_id references no person.
        """
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(entries).values(
                    description=entry.description,
                    amount=entry.amount,
                    due_date=entry.due_date,
                    person_id=entry.person_id,
                )
            )
            entry_id = result.inserted_primary_key[0]
        logger.info("Created entry id=%s for person id=%s.", entry_id, entry.person_id)
        return Entry(
            id=entry_id,
            description=entry.description,
            amount=entry.amount,
            due_date=entry.due_date,
            person_id=entry.person_id,
        )

    def get_by_id(self, entry_id: int) -> Entry:
        with self._engine.connect() as conn:
            row = conn.execute(select(entries).where(entries.c.id == entry_id)).one()
        return Entry(
            id=row.id,
            description=row.description,
            amount=row.amount,
            due_date=row.due_date,
            person_id=row.person_id,
        )

    def delete(self, entry_id: int) -> None:
        with self._engine.begin() as conn:
            conn.execute(select(entries.c.id).where(entries.c.id == entry_id)).one()
            conn.execute(delete(entries).where(entries.c.id == entry_id))
        logger.info("Deleted entry id=%s.", entry_id)
