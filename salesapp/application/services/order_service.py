"""
Order Service
=============

Application service that coordinates order-related operations.
Every operation returns an order view (OrderResponse) with product
names resolved at read time.
"""
from typing import Dict, Iterable, List, Optional, Tuple

from salesapp.application.dto.order_dto import OrderResponse
from salesapp.application.use_cases.order.change_order_status import ChangeOrderStatusUseCase
from salesapp.application.use_cases.order.create_order import CreateOrderUseCase
from salesapp.domain.exceptions import NotFoundError
from salesapp.domain.models.order import Order, OrderStatus, PaymentMethod
from salesapp.domain.repositories.order_repository import OrderRepository
from salesapp.domain.repositories.person_repository import PersonRepository
from salesapp.domain.repositories.product_repository import ProductRepository


class OrderService:
    """
    Application service for order operations.

    This service coordinates order creation and the status lifecycle.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        person_repository: PersonRepository,
        product_repository: ProductRepository,
    ):
        """
        Initialize service with repositories.

        Args:
            order_repository: Repository for order persistence
            person_repository: Used to check the customer exists
            product_repository: Used for price snapshots and product names
        """
        self._orders = order_repository
        self._products = product_repository
        self._create_use_case = CreateOrderUseCase(order_repository, person_repository, product_repository)
        self._status_use_case = ChangeOrderStatusUseCase(order_repository)

    def _product_names(self, orders: Iterable[Order]) -> Dict[int, str]:
        product_ids = {pid for order in orders for pid in order.product_ids()}
        return {product.id: product.name for product in self._products.find_by_ids(product_ids)}

    def _to_view(self, order: Order) -> OrderResponse:
        return OrderResponse.from_entity(order, self._product_names([order]))

    def create_order(
        self,
        person_id: int,
        items: Iterable[Tuple[int, int]],
        payment_method: PaymentMethod = PaymentMethod.CASH,
    ) -> OrderResponse:
        """
        Create an order. See CreateOrderUseCase.

        Args:
            person_id: Customer placing the order
            items: (product_id, quantity) pairs, duplicates allowed
            payment_method: Payment method
        """
        order, products = self._create_use_case.execute(
            person_id=person_id,
            items=items,
            payment_method=payment_method,
        )
        names = {product_id: product.name for product_id, product in products.items()}
        return OrderResponse.from_entity(order, names)

    def get_order(self, order_id: int) -> OrderResponse:
        """
        Get an order by ID.

        Raises:
            NotFoundError: If the order does not exist
        """
        order = self._orders.find_by_id(order_id)
        if not order:
            raise NotFoundError("Order not found")
        return self._to_view(order)

    def list_orders(
        self,
        status: Optional[OrderStatus] = None,
        person_id: Optional[int] = None,
    ) -> List[OrderResponse]:
        """List orders newest first, optionally filtered by status and person."""
        orders = self._orders.search(status=status, person_id=person_id)
        names = self._product_names(orders)
        return [OrderResponse.from_entity(order, names) for order in orders]

    def mark_paid(self, order_id: int) -> OrderResponse:
        """Pending -> Paid."""
        return self._to_view(self._status_use_case.execute(order_id, OrderStatus.PAID))

    def mark_shipped(self, order_id: int) -> OrderResponse:
        """Paid -> Shipped."""
        return self._to_view(self._status_use_case.execute(order_id, OrderStatus.SHIPPED))

    def mark_received(self, order_id: int) -> OrderResponse:
        """Shipped -> Received."""
        return self._to_view(self._status_use_case.execute(order_id, OrderStatus.RECEIVED))
