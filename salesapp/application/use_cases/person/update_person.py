"""
Update Person Use Case
======================
"""
import logging
from typing import Optional

from salesapp.application.use_cases.person.register_person import CPF_TAKEN
from salesapp.domain.exceptions import ConflictError, NotFoundError, UniqueConstraintViolation
from salesapp.domain.models.person import Person
from salesapp.domain.repositories.person_repository import PersonRepository

logger = logging.getLogger(__name__)


class UpdatePersonUseCase:
    """Use case for updating name, CPF and address of a person."""

    def __init__(self, person_repository: PersonRepository):
        self._repository = person_repository

    def execute(self, person_id: int, name: str, cpf: str, address: Optional[str] = None) -> Person:
        """
        Execute the update person use case.

        Keeping the person's own CPF is always allowed.

        Raises:
            NotFoundError: If the person does not exist
            ValidationError: If name or CPF are invalid
            ConflictError: If the CPF belongs to another person
        """
        person = self._repository.find_by_id(person_id)
        if not person:
            raise NotFoundError("Person not found")

        person.rename(name)
        person.change_cpf(cpf)
        person.change_address(address)

        owner = self._repository.find_by_cpf(person.cpf)
        if owner and owner.id != person.id:
            logger.warning("Rejected update of person %s: CPF %s already registered", person_id, person.cpf)
            raise ConflictError(CPF_TAKEN)

        try:
            updated = self._repository.update(person)
        except UniqueConstraintViolation:
            logger.warning("Rejected update of person %s: CPF %s already registered", person_id, person.cpf)
            raise ConflictError(CPF_TAKEN)

        logger.info("Person %s updated", person_id)
        return updated
