"""
Person Controller
=================

FastAPI controller for person (customer) management endpoints.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Response, status

from salesapp.api.v1.dependencies import get_person_service
from salesapp.api.v1.errors import to_http_exception
from salesapp.application.dto.person_dto import (
    PersonCreateRequest,
    PersonResponse,
    PersonUpdateRequest,
)
from salesapp.application.services.person_service import PersonService
from salesapp.domain.constants.limits import MAX_ID
from salesapp.domain.exceptions import DomainError

router = APIRouter(tags=["people"])


@router.get(
    "",
    response_model=List[PersonResponse],
    summary="List people",
    description="Get people ordered by name, optionally filtered by name substring or exact CPF."
)
def list_people(
    name: Optional[str] = None,
    cpf: Optional[str] = None,
    service: PersonService = Depends(get_person_service),
) -> List[PersonResponse]:
    """List people with optional filters."""
    return [PersonResponse.from_entity(person) for person in service.list_people(name=name, cpf=cpf)]


@router.get(
    "/{person_id}",
    response_model=PersonResponse,
    summary="Get person by ID",
)
def get_person(
    person_id: int = Path(..., description="Person ID", le=MAX_ID),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Get a specific person by ID."""
    try:
        return PersonResponse.from_entity(service.get_person(person_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "",
    response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a person",
    description="""
    Register a new person.

    The CPF is validated with its check digits and stored without punctuation.
    Returns 409 if another person already has the same CPF.
    """
)
def create_person(
    request: PersonCreateRequest,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Register a person."""
    try:
        person = service.register_person(
            name=request.name,
            cpf=request.cpf,
            address=request.address,
        )
        return PersonResponse.from_entity(person)
    except DomainError as e:
        raise to_http_exception(e)


@router.put(
    "/{person_id}",
    response_model=PersonResponse,
    summary="Update a person",
    description="Update name, CPF and address. Returns 409 if the CPF belongs to another person."
)
def update_person(
    request: PersonUpdateRequest,
    person_id: int = Path(..., description="Person ID", le=MAX_ID),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Update a person."""
    try:
        person = service.update_person(
            person_id=person_id,
            name=request.name,
            cpf=request.cpf,
            address=request.address,
        )
        return PersonResponse.from_entity(person)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete(
    "/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a person",
)
def delete_person(
    person_id: int = Path(..., description="Person ID", le=MAX_ID),
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Delete a person."""
    try:
        service.delete_person(person_id)
    except DomainError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
