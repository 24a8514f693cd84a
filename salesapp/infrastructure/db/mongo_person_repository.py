"""
MongoDB Person Repository
=========================

Concrete implementation of PersonRepository using MongoDB.
"""
import logging
import re
from typing import List, Optional

from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from salesapp.core.config import get_settings
from salesapp.domain.constants.person_fields import PersonFields
from salesapp.domain.exceptions import NotFoundError, UniqueConstraintViolation
from salesapp.domain.models.person import Person
from salesapp.domain.repositories.person_repository import PersonRepository
from salesapp.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from salesapp.infrastructure.db.sequence import MongoSequence

logger = logging.getLogger(__name__)


class MongoPersonRepository(PersonRepository):
    """
    MongoDB implementation of PersonRepository.

    CPF uniqueness is enforced by a unique index (see ensure_indexes).
    """

    def __init__(self, client: Optional[MongoClientManager] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        collection_name = get_settings().people_collection
        self._collection = self._client.get_collection(collection_name)
        self._sequence = MongoSequence(self._client, collection_name)

    def ensure_indexes(self) -> None:
        """Create the unique indexes this repository relies on."""
        self._collection.create_index([(PersonFields.ID, ASCENDING)], unique=True)
        self._collection.create_index([(PersonFields.CPF, ASCENDING)], unique=True)
        self._collection.create_index([(PersonFields.NAME, ASCENDING)])

    def _to_entity(self, doc: dict) -> Person:
        """Convert MongoDB document to Person entity."""
        return Person(
            id=doc[PersonFields.ID],
            name=doc[PersonFields.NAME],
            cpf=doc[PersonFields.CPF],
            address=doc.get(PersonFields.ADDRESS),
        )

    def _to_document(self, person: Person) -> dict:
        """Convert Person entity to MongoDB document."""
        return {
            PersonFields.ID: person.id,
            PersonFields.NAME: person.name,
            PersonFields.CPF: person.cpf,
            PersonFields.ADDRESS: person.address,
        }

    def create(self, person: Person) -> Person:
        """Create a new person."""
        person.id = self._sequence.next_value()
        try:
            self._collection.insert_one(self._to_document(person))
        except DuplicateKeyError:
            person.id = None
            raise UniqueConstraintViolation(PersonFields.CPF, person.cpf)
        return person

    def update(self, person: Person) -> Person:
        """Update an existing person."""
        doc = self._to_document(person)
        try:
            result = self._collection.find_one_and_update(
                {PersonFields.ID: person.id},
                {"$set": {k: v for k, v in doc.items() if k != PersonFields.ID}},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise UniqueConstraintViolation(PersonFields.CPF, person.cpf)

        if not result:
            raise NotFoundError("Person not found")

        return self._to_entity(result)

    def find_by_id(self, person_id: int) -> Optional[Person]:
        """Find a person by its ID."""
        doc = self._collection.find_one({PersonFields.ID: person_id})
        return self._to_entity(doc) if doc else None

    def find_by_cpf(self, cpf: str) -> Optional[Person]:
        """Find a person by exact CPF."""
        doc = self._collection.find_one({PersonFields.CPF: cpf})
        return self._to_entity(doc) if doc else None

    def search(self, name: Optional[str] = None, cpf: Optional[str] = None) -> List[Person]:
        """List people ordered by name."""
        query = {}
        if name:
            query[PersonFields.NAME] = {"$regex": re.escape(name), "$options": "i"}
        if cpf is not None:
            query[PersonFields.CPF] = cpf
        docs = self._collection.find(query).sort(PersonFields.NAME, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def delete(self, person_id: int) -> bool:
        """Delete a person."""
        result = self._collection.delete_one({PersonFields.ID: person_id})
        return result.deleted_count > 0

    def exists(self, person_id: int) -> bool:
        """Check if a person exists."""
        count = self._collection.count_documents({PersonFields.ID: person_id}, limit=1)
        return count > 0

    def count(self) -> int:
        return self._collection.count_documents({})
