"""
MongoDB Product Repository
==========================

Concrete implementation of ProductRepository using MongoDB.
Monetary values are stored as Decimal128.
"""
import logging
import re
from decimal import Decimal
from typing import Iterable, List, Optional

from bson.decimal128 import Decimal128
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from salesapp.core.config import get_settings
from salesapp.domain.constants.product_fields import ProductFields
from salesapp.domain.exceptions import NotFoundError, UniqueConstraintViolation
from salesapp.domain.models.product import Product
from salesapp.domain.repositories.product_repository import ProductRepository
from salesapp.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from salesapp.infrastructure.db.sequence import MongoSequence

logger = logging.getLogger(__name__)


def to_decimal128(value: Decimal) -> Decimal128:
    return Decimal128(str(value))


def from_decimal128(value) -> Decimal:
    if isinstance(value, Decimal128):
        return value.to_decimal()
    return Decimal(str(value))


class MongoProductRepository(ProductRepository):
    """MongoDB implementation of ProductRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        collection_name = get_settings().products_collection
        self._collection = self._client.get_collection(collection_name)
        self._sequence = MongoSequence(self._client, collection_name)

    def ensure_indexes(self) -> None:
        """Create the unique indexes this repository relies on."""
        self._collection.create_index([(ProductFields.ID, ASCENDING)], unique=True)
        self._collection.create_index([(ProductFields.CODE, ASCENDING)], unique=True)
        self._collection.create_index([(ProductFields.NAME, ASCENDING)])

    def _to_entity(self, doc: dict) -> Product:
        """Convert MongoDB document to Product entity."""
        return Product(
            id=doc[ProductFields.ID],
            name=doc[ProductFields.NAME],
            code=doc[ProductFields.CODE],
            value=from_decimal128(doc[ProductFields.VALUE]),
        )

    def _to_document(self, product: Product) -> dict:
        """Convert Product entity to MongoDB document."""
        return {
            ProductFields.ID: product.id,
            ProductFields.NAME: product.name,
            ProductFields.CODE: product.code,
            ProductFields.VALUE: to_decimal128(product.value),
        }

    def create(self, product: Product) -> Product:
        """Create a new product."""
        product.id = self._sequence.next_value()
        try:
            self._collection.insert_one(self._to_document(product))
        except DuplicateKeyError:
            product.id = None
            raise UniqueConstraintViolation(ProductFields.CODE, product.code)
        return product

    def update(self, product: Product) -> Product:
        """Update an existing product."""
        doc = self._to_document(product)
        try:
            result = self._collection.find_one_and_update(
                {ProductFields.ID: product.id},
                {"$set": {k: v for k, v in doc.items() if k != ProductFields.ID}},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise UniqueConstraintViolation(ProductFields.CODE, product.code)

        if not result:
            raise NotFoundError("Product not found")

        return self._to_entity(result)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Find a product by its ID."""
        doc = self._collection.find_one({ProductFields.ID: product_id})
        return self._to_entity(doc) if doc else None

    def find_by_ids(self, product_ids: Iterable[int]) -> List[Product]:
        """Load several products in one query."""
        ids = list(set(product_ids))
        if not ids:
            return []
        docs = self._collection.find({ProductFields.ID: {"$in": ids}})
        return [self._to_entity(doc) for doc in docs]

    def find_by_code(self, code: str) -> Optional[Product]:
        """Find a product by exact code."""
        doc = self._collection.find_one({ProductFields.CODE: code})
        return self._to_entity(doc) if doc else None

    def search(
        self,
        name: Optional[str] = None,
        code: Optional[str] = None,
        min_value: Optional[Decimal] = None,
        max_value: Optional[Decimal] = None,
    ) -> List[Product]:
        """List products ordered by name."""
        query = {}
        if name:
            query[ProductFields.NAME] = {"$regex": re.escape(name), "$options": "i"}
        if code:
            query[ProductFields.CODE] = {"$regex": re.escape(code), "$options": "i"}

        value_range = {}
        if min_value is not None:
            value_range["$gte"] = to_decimal128(min_value)
        if max_value is not None:
            value_range["$lte"] = to_decimal128(max_value)
        if value_range:
            query[ProductFields.VALUE] = value_range

        docs = self._collection.find(query).sort(ProductFields.NAME, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def delete(self, product_id: int) -> bool:
        """Delete a product."""
        result = self._collection.delete_one({ProductFields.ID: product_id})
        return result.deleted_count > 0

    def count(self) -> int:
        return self._collection.count_documents({})
