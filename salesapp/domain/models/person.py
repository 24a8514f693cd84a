"""
Person Model
============

Domain model representing a customer.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass
from typing import Optional

from salesapp.domain.cpf import is_valid_cpf, only_digits
from salesapp.domain.exceptions import ValidationError

NAME_MAX_LENGTH = 150


@dataclass
class Person:
    """
    Person domain model.

    ``cpf`` is always kept in its 11-digit form.
    ``id`` is None until the person is persisted.
    """
    name: str
    cpf: str
    address: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        self.rename(self.name)
        self.change_cpf(self.cpf)
        self.change_address(self.address)

    def rename(self, new_name: str) -> None:
        """Update person name."""
        if not new_name or not new_name.strip():
            raise ValidationError("Name cannot be empty")
        if len(new_name.strip()) > NAME_MAX_LENGTH:
            raise ValidationError(f"Name cannot exceed {NAME_MAX_LENGTH} characters")
        self.name = new_name.strip()

    def change_cpf(self, new_cpf: str) -> None:
        """Update CPF (stored without punctuation)."""
        if not is_valid_cpf(new_cpf):
            raise ValidationError("Invalid CPF")
        self.cpf = only_digits(new_cpf)

    def change_address(self, new_address: Optional[str]) -> None:
        """Update address; blank values clear it."""
        self.address = new_address.strip() if new_address and new_address.strip() else None
