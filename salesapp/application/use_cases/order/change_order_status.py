"""
Change Order Status Use Case
============================

Moves an order one step along Pending -> Paid -> Shipped -> Received.
"""
import logging

from salesapp.domain.exceptions import ConflictError, NotFoundError
from salesapp.domain.models.order import Order, OrderStatus
from salesapp.domain.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ChangeOrderStatusUseCase:
    """
    Use case for the order status transitions.

    The order must be in the exact predecessor state of the target;
    anything else is a conflict.
    """

    def __init__(self, order_repository: OrderRepository):
        self._repository = order_repository

    def execute(self, order_id: int, target: OrderStatus) -> Order:
        """
        Execute the transition.

        Args:
            order_id: Order to advance
            target: Paid, Shipped or Received

        Returns:
            Updated order entity

        Raises:
            NotFoundError: If the order does not exist
            ConflictError: If the order is not in the required state
        """
        order = self._repository.find_by_id(order_id)
        if not order:
            raise NotFoundError("Order not found")

        previous = order.status
        transition = {
            OrderStatus.PAID: order.mark_paid,
            OrderStatus.SHIPPED: order.mark_shipped,
            OrderStatus.RECEIVED: order.mark_received,
        }.get(target)
        if transition is None:
            raise ValueError(f"No transition leads to {target}")

        try:
            transition()
        except ConflictError:
            logger.warning("Rejected transition of order %s: %s -> %s", order_id, previous.value, target.value)
            raise

        updated = self._repository.update_status(order_id, previous, order.status)
        if updated is None:
            # Status changed by a concurrent request between load and save
            logger.warning("Order %s changed concurrently, transition to %s rejected", order_id, target.value)
            raise ConflictError(f"Order status changed concurrently, could not mark as {target.value}")

        logger.info("Order %s status %s -> %s", order_id, previous.value, updated.status.value)
        return updated
