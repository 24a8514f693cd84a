"""
MongoDB Order Repository
========================

Concrete implementation of OrderRepository using MongoDB.

Items are embedded in the order document, so an order is always
written with a single atomic operation.
"""
import logging
from typing import List, Optional

from pymongo import ASCENDING, DESCENDING, ReturnDocument

from salesapp.core.config import get_settings
from salesapp.domain.constants.order_fields import OrderFields, OrderItemFields
from salesapp.domain.models.order import Order, OrderItem, OrderStatus
from salesapp.domain.repositories.order_repository import OrderRepository
from salesapp.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from salesapp.infrastructure.db.mongo_product_repository import from_decimal128, to_decimal128
from salesapp.infrastructure.db.sequence import MongoSequence
from salesapp.utils.datetime_utils import ensure_aware

logger = logging.getLogger(__name__)


class MongoOrderRepository(OrderRepository):
    """MongoDB implementation of OrderRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        collection_name = get_settings().orders_collection
        self._collection = self._client.get_collection(collection_name)
        self._sequence = MongoSequence(self._client, collection_name)
        self._item_sequence = MongoSequence(self._client, f"{collection_name}.items")

    def ensure_indexes(self) -> None:
        """Create the indexes used by lookups and listings."""
        self._collection.create_index([(OrderFields.ID, ASCENDING)], unique=True)
        self._collection.create_index([(OrderFields.PERSON_ID, ASCENDING)])
        self._collection.create_index([(OrderFields.STATUS, ASCENDING)])
        self._collection.create_index([(OrderFields.CREATED_AT, DESCENDING)])

    def _to_entity(self, doc: dict) -> Order:
        """Convert MongoDB document to Order entity."""
        items = [
            OrderItem(
                id=item[OrderItemFields.ID],
                product_id=item[OrderItemFields.PRODUCT_ID],
                quantity=item[OrderItemFields.QUANTITY],
                unit_price=from_decimal128(item[OrderItemFields.UNIT_PRICE]),
            )
            for item in doc.get(OrderFields.ITEMS, [])
        ]
        return Order(
            id=doc[OrderFields.ID],
            person_id=doc[OrderFields.PERSON_ID],
            created_at=ensure_aware(doc[OrderFields.CREATED_AT]),
            payment_method=doc[OrderFields.PAYMENT_METHOD],
            status=doc[OrderFields.STATUS],
            items=items,
        )

    def _to_document(self, order: Order) -> dict:
        """Convert Order entity to MongoDB document. Totals are not stored."""
        return {
            OrderFields.ID: order.id,
            OrderFields.PERSON_ID: order.person_id,
            OrderFields.CREATED_AT: order.created_at,
            OrderFields.PAYMENT_METHOD: order.payment_method.value,
            OrderFields.STATUS: order.status.value,
            OrderFields.ITEMS: [
                {
                    OrderItemFields.ID: item.id,
                    OrderItemFields.PRODUCT_ID: item.product_id,
                    OrderItemFields.QUANTITY: item.quantity,
                    OrderItemFields.UNIT_PRICE: to_decimal128(item.unit_price),
                }
                for item in order.items
            ],
        }

    def create(self, order: Order) -> Order:
        """Create a new order with its items in one insert."""
        order.id = self._sequence.next_value()
        order.items = [
            OrderItem(
                id=self._item_sequence.next_value(),
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
            )
            for item in order.items
        ]
        self._collection.insert_one(self._to_document(order))
        return order

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """Find an order by its ID."""
        doc = self._collection.find_one({OrderFields.ID: order_id})
        return self._to_entity(doc) if doc else None

    def search(
        self,
        status: Optional[OrderStatus] = None,
        person_id: Optional[int] = None,
    ) -> List[Order]:
        """List orders, newest first."""
        query = {}
        if status is not None:
            query[OrderFields.STATUS] = OrderStatus(status).value
        if person_id is not None:
            query[OrderFields.PERSON_ID] = person_id
        docs = self._collection.find(query).sort(
            [(OrderFields.CREATED_AT, DESCENDING), (OrderFields.ID, DESCENDING)]
        )
        return [self._to_entity(doc) for doc in docs]

    def update_status(
        self,
        order_id: int,
        expected: OrderStatus,
        new_status: OrderStatus,
    ) -> Optional[Order]:
        """Conditional status update; matches only while the order is still in ``expected``."""
        result = self._collection.find_one_and_update(
            {OrderFields.ID: order_id, OrderFields.STATUS: expected.value},
            {"$set": {OrderFields.STATUS: new_status.value}},
            return_document=ReturnDocument.AFTER,
        )
        return self._to_entity(result) if result else None
