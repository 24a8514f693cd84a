"""
Create Order Use Case
=====================

Business use case for placing an order.

Steps:
1. The person must exist
2. Duplicate product references are merged by summing quantities
3. All products are loaded in one call; any unknown id fails the order
4. Each item copies the product's current value as its unit price
5. The order is stored as Pending with the current timestamp

Nothing is stored if any step before 5 fails.
"""
import logging
from typing import Dict, Iterable, List, Tuple

from salesapp.domain.constants.limits import MAX_QUANTITY
from salesapp.domain.exceptions import NotFoundError, ValidationError
from salesapp.domain.models.order import Order, OrderItem, OrderStatus, PaymentMethod
from salesapp.domain.models.product import Product
from salesapp.domain.repositories.order_repository import OrderRepository
from salesapp.domain.repositories.person_repository import PersonRepository
from salesapp.domain.repositories.product_repository import ProductRepository
from salesapp.utils.datetime_utils import now

logger = logging.getLogger(__name__)


def merge_items(items: Iterable[Tuple[int, int]]) -> Dict[int, int]:
    """
    Merge (product_id, quantity) pairs by product, keeping first-seen order.

    >>> merge_items([(1, 2), (2, 1), (1, 3)])
    {1: 5, 2: 1}
    """
    merged: Dict[int, int] = {}
    for product_id, quantity in items:
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than zero")
        merged[product_id] = merged.get(product_id, 0) + quantity
        if merged[product_id] > MAX_QUANTITY:
            raise ValidationError(f"Quantity cannot exceed {MAX_QUANTITY}")
    return merged


class CreateOrderUseCase:
    """Use case for creating an order with price snapshots."""

    def __init__(
        self,
        order_repository: OrderRepository,
        person_repository: PersonRepository,
        product_repository: ProductRepository,
    ):
        self._orders = order_repository
        self._people = person_repository
        self._products = product_repository

    def execute(
        self,
        person_id: int,
        items: Iterable[Tuple[int, int]],
        payment_method: PaymentMethod = PaymentMethod.CASH,
    ) -> Tuple[Order, Dict[int, Product]]:
        """
        Execute the create order use case.

        Args:
            person_id: Customer placing the order
            items: (product_id, quantity) pairs, duplicates allowed
            payment_method: Payment method

        Returns:
            The created order and the products it references, by id

        Raises:
            NotFoundError: If the person or any product does not exist
            ValidationError: If there are no items or a quantity is not positive
        """
        if not self._people.exists(person_id):
            raise NotFoundError("Person not found")

        merged = merge_items(items)
        if not merged:
            raise ValidationError("An order needs at least one item")

        products = {product.id: product for product in self._products.find_by_ids(merged)}
        missing: List[int] = [pid for pid in merged if pid not in products]
        if missing:
            logger.warning("Rejected order for person %s: unknown products %s", person_id, missing)
            raise NotFoundError("One or more products were not found")

        order = Order(
            person_id=person_id,
            payment_method=payment_method,
            status=OrderStatus.PENDING,
            created_at=now(),
            items=[
                OrderItem(
                    product_id=product_id,
                    quantity=quantity,
                    unit_price=products[product_id].value,
                )
                for product_id, quantity in merged.items()
            ],
        )

        created = self._orders.create(order)
        logger.info(
            "Order %s created for person %s with %d item(s), total %s",
            created.id, person_id, len(created.items), created.total,
        )
        return created, products
