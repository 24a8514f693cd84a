"""
Person Repository Interface
===========================

Abstract interface for person data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from salesapp.domain.models.person import Person


class PersonRepository(ABC):
    """
    Abstract repository for person persistence operations.

    Implementations must enforce CPF uniqueness at the store level and
    raise UniqueConstraintViolation when it is violated.
    """

    @abstractmethod
    def create(self, person: Person) -> Person:
        """
        Create a new person.

        Args:
            person: Person entity to create (id is assigned by the store)

        Returns:
            Created person entity with its id

        Raises:
            UniqueConstraintViolation: If the CPF is already stored
        """
        pass

    @abstractmethod
    def update(self, person: Person) -> Person:
        """
        Update an existing person.

        Args:
            person: Person entity with updated data

        Returns:
            Updated person entity

        Raises:
            UniqueConstraintViolation: If the CPF belongs to another person
        """
        pass

    @abstractmethod
    def find_by_id(self, person_id: int) -> Optional[Person]:
        """
        Find a person by its ID.

        Returns:
            Person entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_cpf(self, cpf: str) -> Optional[Person]:
        """
        Find a person by exact CPF (11 digits).

        Returns:
            Person entity if found, None otherwise
        """
        pass

    @abstractmethod
    def search(self, name: Optional[str] = None, cpf: Optional[str] = None) -> List[Person]:
        """
        List people ordered by name.

        Args:
            name: Case-insensitive substring of the name
            cpf: Exact CPF digits; None disables the filter

        Returns:
            List of person entities
        """
        pass

    @abstractmethod
    def delete(self, person_id: int) -> bool:
        """
        Delete a person.

        Returns:
            True if person was found and deleted, False otherwise
        """
        pass

    @abstractmethod
    def exists(self, person_id: int) -> bool:
        """
        Check if a person exists.

        Returns:
            True if person exists, False otherwise
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored people."""
        pass
