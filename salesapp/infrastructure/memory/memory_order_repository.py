"""
In-Memory Order Repository
==========================
"""
import copy
import itertools
from typing import Dict, List, Optional

from salesapp.domain.models.order import Order, OrderItem, OrderStatus
from salesapp.domain.repositories.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):
    """Dict-backed OrderRepository."""

    def __init__(self):
        self._rows: Dict[int, Order] = {}
        self._ids = itertools.count(1)
        self._item_ids = itertools.count(1)

    def create(self, order: Order) -> Order:
        order.id = next(self._ids)
        order.items = [
            OrderItem(
                id=next(self._item_ids),
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
            )
            for item in order.items
        ]
        self._rows[order.id] = copy.deepcopy(order)
        return order

    def find_by_id(self, order_id: int) -> Optional[Order]:
        row = self._rows.get(order_id)
        return copy.deepcopy(row) if row else None

    def search(
        self,
        status: Optional[OrderStatus] = None,
        person_id: Optional[int] = None,
    ) -> List[Order]:
        rows = list(self._rows.values())
        if status is not None:
            rows = [row for row in rows if row.status == OrderStatus(status)]
        if person_id is not None:
            rows = [row for row in rows if row.person_id == person_id]
        rows.sort(key=lambda row: (row.created_at, row.id), reverse=True)
        return [copy.deepcopy(row) for row in rows]

    def update_status(
        self,
        order_id: int,
        expected: OrderStatus,
        new_status: OrderStatus,
    ) -> Optional[Order]:
        row = self._rows.get(order_id)
        if row is None or row.status != expected:
            return None
        row.status = new_status
        return copy.deepcopy(row)
