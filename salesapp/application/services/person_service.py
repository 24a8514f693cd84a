"""
Person Service
==============

Application service that coordinates person-related operations.
"""
import logging
from typing import List, Optional

from salesapp.application.use_cases.person.register_person import RegisterPersonUseCase
from salesapp.application.use_cases.person.update_person import UpdatePersonUseCase
from salesapp.domain.cpf import only_digits
from salesapp.domain.exceptions import NotFoundError
from salesapp.domain.models.person import Person
from salesapp.domain.repositories.person_repository import PersonRepository

logger = logging.getLogger(__name__)


class PersonService:
    """
    Application service for person operations.

    This service coordinates the person use cases and provides
    a high-level interface for customer management.
    """

    def __init__(self, person_repository: PersonRepository):
        """
        Initialize service with repository.

        Args:
            person_repository: Repository for person persistence
        """
        self._repository = person_repository
        self._register_use_case = RegisterPersonUseCase(person_repository)
        self._update_use_case = UpdatePersonUseCase(person_repository)

    def register_person(self, name: str, cpf: str, address: Optional[str] = None) -> Person:
        """Register a new person. See RegisterPersonUseCase."""
        return self._register_use_case.execute(name=name, cpf=cpf, address=address)

    def update_person(self, person_id: int, name: str, cpf: str, address: Optional[str] = None) -> Person:
        """Update an existing person. See UpdatePersonUseCase."""
        return self._update_use_case.execute(person_id=person_id, name=name, cpf=cpf, address=address)

    def get_person(self, person_id: int) -> Person:
        """
        Get a person by ID.

        Raises:
            NotFoundError: If the person does not exist
        """
        person = self._repository.find_by_id(person_id)
        if not person:
            raise NotFoundError("Person not found")
        return person

    def list_people(self, name: Optional[str] = None, cpf: Optional[str] = None) -> List[Person]:
        """
        List people ordered by name.

        Args:
            name: Case-insensitive substring of the name
            cpf: Exact CPF; punctuation is ignored
        """
        name = name.strip() if name and name.strip() else None
        # A non-blank filter without digits becomes "" and matches nobody
        cpf = only_digits(cpf) if cpf and cpf.strip() else None
        return self._repository.search(name=name, cpf=cpf)

    def delete_person(self, person_id: int) -> None:
        """
        Delete a person.

        Raises:
            NotFoundError: If the person does not exist
        """
        if not self._repository.delete(person_id):
            raise NotFoundError("Person not found")
        logger.info("Person %s deleted", person_id)
