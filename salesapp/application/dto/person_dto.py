"""
Person DTO
==========

Pydantic models for person API requests and responses.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from salesapp.domain.cpf import normalize_cpf
from salesapp.domain.models.person import NAME_MAX_LENGTH, Person


class PersonWriteRequest(BaseModel):
    """DTO for creating or updating a person. CPF may contain punctuation."""
    name: str = Field(..., description="Full name", max_length=NAME_MAX_LENGTH)
    cpf: str = Field(..., description="CPF (11 digits, punctuation allowed)")
    address: Optional[str] = Field(None, description="Optional address")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ana Maria",
                "cpf": "111.444.777-35",
                "address": "Rua A, 123"
            }
        }
    )

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name cannot be empty")
        return value.strip()

    @field_validator("cpf")
    @classmethod
    def _valid_cpf(cls, value: str) -> str:
        return normalize_cpf(value)


class PersonCreateRequest(PersonWriteRequest):
    """DTO for creating a person."""


class PersonUpdateRequest(PersonWriteRequest):
    """DTO for updating a person."""


class PersonResponse(BaseModel):
    """DTO for person data."""
    id: int
    name: str
    cpf: str
    address: Optional[str] = None

    @classmethod
    def from_entity(cls, person: Person) -> "PersonResponse":
        return cls(id=person.id, name=person.name, cpf=person.cpf, address=person.address)
