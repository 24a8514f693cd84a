from typing import TYPE_CHECKING
from ...domain.repositories.order_repository import OrderRepository
from ...domain.repositories.person_repository import PersonRepository
from ...domain.repositories.product_repository import ProductRepository
from ...application.services.order_service import OrderService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class OrderProvider:
    """Order service provider - registers order-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register order service.
        Service is created with repositories from container.
        """
        container.register_singleton(
            OrderService,
            OrderService(
                order_repository=container.get(OrderRepository),
                person_repository=container.get(PersonRepository),
                product_repository=container.get(ProductRepository),
            )
        )
