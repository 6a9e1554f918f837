"""
Dependency injection for the finance bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
The engine is created once per application and kept on app.state.
"""

from fastapi import Request
from sqlalchemy.engine import Engine

from app.application.finance.create_entry import CreateEntryUseCase
from app.application.finance.create_person import CreatePersonUseCase
from app.application.finance.delete_entry import DeleteEntryUseCase
from app.application.finance.delete_person import DeletePersonUseCase
from app.application.finance.get_entry import GetEntryUseCase
from app.application.finance.get_person import GetPersonUseCase
from app.application.finance.set_person_active import SetPersonActiveUseCase
from app.infrastructure.finance.entry_repository import EntryRepositoryAdapter
from app.infrastructure.finance.person_repository import PersonRepositoryAdapter


def _get_db_engine(request: Request) -> Engine:
    """Return the SQLAlchemy engine owned by the running application."""
    return request.app.state.engine


def get_create_person_use_case(request: Request) -> CreatePersonUseCase:
    return CreatePersonUseCase(person_repo=PersonRepositoryAdapter(_get_db_engine(request)))


def get_get_person_use_case(request: Request) -> GetPersonUseCase:
    return GetPersonUseCase(person_repo=PersonRepositoryAdapter(_get_db_engine(request)))


def get_set_person_active_use_case(request: Request) -> SetPersonActiveUseCase:
    return SetPersonActiveUseCase(person_repo=PersonRepositoryAdapter(_get_db_engine(request)))


def get_delete_person_use_case(request: Request) -> DeletePersonUseCase:
    return DeletePersonUseCase(person_repo=PersonRepositoryAdapter(_get_db_engine(request)))


def get_create_entry_use_case(request: Request) -> CreateEntryUseCase:
    """Build CreateEntryUseCase with both repositories on the same engine."""
    engine = _get_db_engine(request)
    return CreateEntryUseCase(
        person_repo=PersonRepositoryAdapter(engine),
        entry_repo=EntryRepositoryAdapter(engine),
    )


def get_get_entry_use_case(request: Request) -> GetEntryUseCase:
    return GetEntryUseCase(entry_repo=EntryRepositoryAdapter(_get_db_engine(request)))


def get_delete_entry_use_case(request: Request) -> DeleteEntryUseCase:
    return DeleteEntryUseCase(entry_repo=EntryRepositoryAdapter(_get_db_engine(request)))
