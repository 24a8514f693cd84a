"""
In-Memory Person Repository
===========================
"""
import copy
import itertools
from typing import Dict, List, Optional

from salesapp.domain.constants.person_fields import PersonFields
from salesapp.domain.exceptions import NotFoundError, UniqueConstraintViolation
from salesapp.domain.models.person import Person
from salesapp.domain.repositories.person_repository import PersonRepository


class InMemoryPersonRepository(PersonRepository):
    """Dict-backed PersonRepository. Stores copies so callers cannot mutate stored rows."""

    def __init__(self):
        self._rows: Dict[int, Person] = {}
        self._ids = itertools.count(1)

    def _check_unique_cpf(self, person: Person) -> None:
        for row in self._rows.values():
            if row.cpf == person.cpf and row.id != person.id:
                raise UniqueConstraintViolation(PersonFields.CPF, person.cpf)

    def create(self, person: Person) -> Person:
        self._check_unique_cpf(person)
        person.id = next(self._ids)
        self._rows[person.id] = copy.copy(person)
        return person

    def update(self, person: Person) -> Person:
        if person.id not in self._rows:
            raise NotFoundError("Person not found")
        self._check_unique_cpf(person)
        self._rows[person.id] = copy.copy(person)
        return copy.copy(person)

    def find_by_id(self, person_id: int) -> Optional[Person]:
        row = self._rows.get(person_id)
        return copy.copy(row) if row else None

    def find_by_cpf(self, cpf: str) -> Optional[Person]:
        for row in self._rows.values():
            if row.cpf == cpf:
                return copy.copy(row)
        return None

    def search(self, name: Optional[str] = None, cpf: Optional[str] = None) -> List[Person]:
        rows = list(self._rows.values())
        if name:
            rows = [row for row in rows if name.lower() in row.name.lower()]
        if cpf is not None:
            rows = [row for row in rows if row.cpf == cpf]
        return [copy.copy(row) for row in sorted(rows, key=lambda row: row.name)]

    def delete(self, person_id: int) -> bool:
        return self._rows.pop(person_id, None) is not None

    def exists(self, person_id: int) -> bool:
        return person_id in self._rows

    def count(self) -> int:
        return len(self._rows)
