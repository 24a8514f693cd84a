"""
Order entity tests: derived totals and the status state machine.
"""
from decimal import Decimal

import pytest

from salesapp.domain.exceptions import ConflictError, ValidationError
from salesapp.domain.models.order import Order, OrderItem, OrderStatus, PaymentMethod


def make_order(**overrides):
    data = dict(
        person_id=1,
        items=[
            OrderItem(product_id=1, quantity=2, unit_price=Decimal("59.90")),
            OrderItem(product_id=2, quantity=1, unit_price=Decimal("29.50")),
        ],
    )
    data.update(overrides)
    return Order(**data)


# ══════════════════════════════════════════════════════════════
# CONSTRUCTION
# ══════════════════════════════════════════════════════════════

class TestOrderConstruction:
    def test_defaults(self):
        order = make_order()
        assert order.status == OrderStatus.PENDING
        assert order.payment_method == PaymentMethod.CASH
        assert order.created_at.tzinfo is not None

    def test_subtotal_and_total_are_derived(self):
        order = make_order()
        assert order.items[0].subtotal == Decimal("119.80")
        assert order.total == Decimal("149.30")

    def test_requires_items(self):
        with pytest.raises(ValidationError):
            make_order(items=[])

    def test_rejects_two_items_for_same_product(self):
        with pytest.raises(ValidationError):
            make_order(items=[
                OrderItem(product_id=1, quantity=1, unit_price=Decimal("1")),
                OrderItem(product_id=1, quantity=2, unit_price=Decimal("1")),
            ])

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_item_quantity_must_be_positive(self, quantity):
        with pytest.raises(ValidationError):
            OrderItem(product_id=1, quantity=quantity, unit_price=Decimal("1"))

    def test_item_unit_price_is_immutable(self):
        item = OrderItem(product_id=1, quantity=1, unit_price=Decimal("1"))
        with pytest.raises(AttributeError):
            item.unit_price = Decimal("2")

    def test_payment_method_accepts_raw_value(self):
        assert make_order(payment_method="BankSlip").payment_method == PaymentMethod.BANK_SLIP


# ══════════════════════════════════════════════════════════════
# STATUS TRANSITIONS
# ══════════════════════════════════════════════════════════════

class TestOrderTransitions:
    def test_full_lifecycle(self):
        order = make_order()
        order.mark_paid()
        assert order.status == OrderStatus.PAID
        order.mark_shipped()
        assert order.status == OrderStatus.SHIPPED
        order.mark_received()
        assert order.status == OrderStatus.RECEIVED

    def test_paid_twice_conflicts(self):
        order = make_order()
        order.mark_paid()
        with pytest.raises(ConflictError, match="pending"):
            order.mark_paid()
        assert order.status == OrderStatus.PAID

    def test_cannot_skip_to_shipped(self):
        order = make_order()
        with pytest.raises(ConflictError, match="paid"):
            order.mark_shipped()
        assert order.status == OrderStatus.PENDING

    def test_cannot_skip_to_received(self):
        order = make_order(status=OrderStatus.PAID)
        with pytest.raises(ConflictError, match="shipped"):
            order.mark_received()

    def test_received_is_final(self):
        order = make_order(status=OrderStatus.RECEIVED)
        for transition in (order.mark_paid, order.mark_shipped, order.mark_received):
            with pytest.raises(ConflictError):
                transition()
        assert order.status == OrderStatus.RECEIVED
