"""
FastAPI router for the finance bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Response, status

from app.application.finance.create_entry import CreateEntryUseCase
from app.application.finance.create_person import CreatePersonUseCase
from app.application.finance.delete_entry import DeleteEntryUseCase
from app.application.finance.delete_person import DeletePersonUseCase
from app.application.finance.dtos import (
    CreateEntryCommand,
    CreatePersonCommand,
    SetPersonActiveCommand,
)
from app.application.finance.get_entry import GetEntryUseCase
from app.application.finance.get_person import GetPersonUseCase
from app.application.finance.set_person_active import SetPersonActiveUseCase
from app.interfaces.finance.dependencies import (
    get_create_entry_use_case,
    get_create_person_use_case,
    get_delete_entry_use_case,
    get_delete_person_use_case,
    get_get_entry_use_case,
    get_get_person_use_case,
    get_set_person_active_use_case,
)
from app.interfaces.finance.schemas import (
    CreateEntryRequest,
    CreatePersonRequest,
    EntryResponse,
    ErrorResponse,
    PersonResponse,
    SetActiveRequest,
)

router = APIRouter(tags=["finance"])

BAD_REQUEST = {400: {"model": ErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}}


@router.post(
    "/people",
    response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Register a person",
)
def create_person(
    request: CreatePersonRequest,
    use_case: CreatePersonUseCase = Depends(get_create_person_use_case),
) -> PersonResponse:
    """Register a person who can own financial entries."""
    result = use_case.execute(
        CreatePersonCommand(name=request.name, active=request.active)
    )
    return PersonResponse(id=result.id, name=result.name, active=result.active)


@router.get(
    "/people/{person_id}",
    response_model=PersonResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a person",
)
def get_person(
    person_id: int,
    use_case: GetPersonUseCase = Depends(get_get_person_use_case),
) -> PersonResponse:
    result = use_case.execute(person_id)
    return PersonResponse(id=result.id, name=result.name, active=result.active)


@router.put(
    "/people/{person_id}/active",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Activate or deactivate a person",
)
def set_person_active(
    person_id: int,
    request: SetActiveRequest,
    use_case: SetPersonActiveUseCase = Depends(get_set_person_active_use_case),
) -> Response:
    use_case.execute(SetPersonActiveCommand(person_id=person_id, active=request.active))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/people/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a person",
    description="Fails with 400 while entries still reference the person.",
)
def delete_person(
    person_id: int,
    use_case: DeletePersonUseCase = Depends(get_delete_person_use_case),
) -> Response:
    use_case.execute(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/entries",
    response_model=EntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Register a financial entry",
    description="The owning person must exist and be active.",
)
def create_entry(
    request: CreateEntryRequest,
    use_case: CreateEntryUseCase = Depends(get_create_entry_use_case),
) -> EntryResponse:
    """Register a financial entry for an active person."""
    result = use_case.execute(
        CreateEntryCommand(
            description=request.description,
            amount=request.amount,
            due_date=request.due_date,
            person_id=request.person_id,
        )
    )
    return EntryResponse(
        id=result.id,
        description=result.description,
        amount=result.amount,
        due_date=result.due_date,
        person_id=result.person_id,
    )


@router.get(
    "/entries/{entry_id}",
    response_model=EntryResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a financial entry",
)
def get_entry(
    entry_id: int,
    use_case: GetEntryUseCase = Depends(get_get_entry_use_case),
) -> EntryResponse:
    result = use_case.execute(entry_id)
    return EntryResponse(
        id=result.id,
        description=result.description,
        amount=result.amount,
        due_date=result.due_date,
        person_id=result.person_id,
    )


@router.delete(
    "/entries/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a financial entry",
)
def delete_entry(
    entry_id: int,
    use_case: DeleteEntryUseCase = Depends(get_delete_entry_use_case),
) -> Response:
    use_case.execute(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
