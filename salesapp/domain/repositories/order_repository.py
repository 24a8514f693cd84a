"""
Order Repository Interface
==========================

Abstract interface for order data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from salesapp.domain.models.order import Order, OrderStatus


class OrderRepository(ABC):
    """
    Abstract repository for order persistence operations.

    An order and its items are stored as a single unit: creating or
    updating an order never leaves partially written items behind.
    """

    @abstractmethod
    def create(self, order: Order) -> Order:
        """
        Create a new order together with its items.

        Args:
            order: Order entity to create (order and item ids are assigned by the store)

        Returns:
            Created order entity with ids
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Find an order by its ID.

        Returns:
            Order entity if found, None otherwise
        """
        pass

    @abstractmethod
    def search(
        self,
        status: Optional[OrderStatus] = None,
        person_id: Optional[int] = None,
    ) -> List[Order]:
        """
        List orders, newest first.

        Args:
            status: Only orders in this status
            person_id: Only orders of this person
        """
        pass

    @abstractmethod
    def update_status(
        self,
        order_id: int,
        expected: OrderStatus,
        new_status: OrderStatus,
    ) -> Optional[Order]:
        """
        Atomically move an order from ``expected`` to ``new_status``.

        Returns:
            Updated order entity, or None when the order does not exist
            or its status is no longer ``expected``
        """
        pass
