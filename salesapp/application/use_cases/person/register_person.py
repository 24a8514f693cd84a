"""
Register Person Use Case
========================

Business use case for registering a new person (customer).
"""
import logging
from typing import Optional

from salesapp.domain.exceptions import ConflictError, UniqueConstraintViolation
from salesapp.domain.models.person import Person
from salesapp.domain.repositories.person_repository import PersonRepository

logger = logging.getLogger(__name__)

CPF_TAKEN = "CPF already registered"


class RegisterPersonUseCase:
    """
    Use case for registering a person.

    The CPF must not belong to any other person.
    """

    def __init__(self, person_repository: PersonRepository):
        """
        Initialize use case with repository.

        Args:
            person_repository: Repository for person persistence
        """
        self._repository = person_repository

    def execute(self, name: str, cpf: str, address: Optional[str] = None) -> Person:
        """
        Execute the register person use case.

        Args:
            name: Full name
            cpf: CPF, punctuation allowed
            address: Optional address

        Returns:
            Registered person entity

        Raises:
            ValidationError: If name or CPF are invalid
            ConflictError: If the CPF is already registered
        """
        person = Person(name=name, cpf=cpf, address=address)

        if self._repository.find_by_cpf(person.cpf):
            logger.warning("Rejected person registration: CPF %s already registered", person.cpf)
            raise ConflictError(CPF_TAKEN)

        try:
            created = self._repository.create(person)
        except UniqueConstraintViolation:
            # Another request stored the same CPF after the check above
            logger.warning("Rejected person registration: CPF %s already registered", person.cpf)
            raise ConflictError(CPF_TAKEN)

        logger.info("Person %s registered", created.id)
        return created
