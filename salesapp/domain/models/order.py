"""
Order Model
===========

Domain model representing a sales order and its line items.

Status follows a strict linear lifecycle:

    Pending -> Paid -> Shipped -> Received

Totals are derived from the items on every read and never stored.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional

from salesapp.domain.exceptions import ConflictError, ValidationError
from salesapp.utils.datetime_utils import now


class OrderStatus(str, Enum):
    """Order lifecycle status."""
    PENDING = "Pending"
    PAID = "Paid"
    SHIPPED = "Shipped"
    RECEIVED = "Received"


class PaymentMethod(str, Enum):
    """How the customer pays for the order."""
    CASH = "Cash"
    CARD = "Card"
    BANK_SLIP = "BankSlip"


# Allowed transitions: target status -> required current status
TRANSITIONS: Dict[OrderStatus, OrderStatus] = {
    OrderStatus.PAID: OrderStatus.PENDING,
    OrderStatus.SHIPPED: OrderStatus.PAID,
    OrderStatus.RECEIVED: OrderStatus.SHIPPED,
}

TRANSITION_ERRORS: Dict[OrderStatus, str] = {
    OrderStatus.PAID: "Only pending orders can be marked as paid",
    OrderStatus.SHIPPED: "Only paid orders can be shipped",
    OrderStatus.RECEIVED: "Only shipped orders can be received",
}


@dataclass(frozen=True)
class OrderItem:
    """
    One product/quantity/price entry of an order.

    ``unit_price`` is the product value copied when the order was created.
    """
    product_id: int
    quantity: int
    unit_price: Decimal
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")
        if self.unit_price < 0:
            raise ValidationError("Unit price cannot be negative")

    @property
    def subtotal(self) -> Decimal:
        return self.quantity * self.unit_price


@dataclass
class Order:
    """
    Order domain model.

    An order always has at least one item and at most one item per product.
    """
    person_id: int
    items: List[OrderItem]
    payment_method: PaymentMethod = PaymentMethod.CASH
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: now())
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.items:
            raise ValidationError("An order needs at least one item")
        product_ids = [item.product_id for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError("An order cannot have two items for the same product")
        self.payment_method = PaymentMethod(self.payment_method)
        self.status = OrderStatus(self.status)

    @property
    def total(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0"))

    def product_ids(self) -> List[int]:
        return [item.product_id for item in self.items]

    def _advance(self, target: OrderStatus) -> None:
        if self.status != TRANSITIONS[target]:
            raise ConflictError(TRANSITION_ERRORS[target])
        self.status = target

    def mark_paid(self) -> None:
        """Pending -> Paid."""
        self._advance(OrderStatus.PAID)

    def mark_shipped(self) -> None:
        """Paid -> Shipped."""
        self._advance(OrderStatus.SHIPPED)

    def mark_received(self) -> None:
        """Shipped -> Received."""
        self._advance(OrderStatus.RECEIVED)
