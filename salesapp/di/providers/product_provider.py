from typing import TYPE_CHECKING
from ...domain.repositories.product_repository import ProductRepository
from ...application.services.product_service import ProductService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product service provider - registers product-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register product service.
        Service is created with repository from container.
        """
        container.register_singleton(
            ProductService,
            ProductService(
                product_repository=container.get(ProductRepository)
            )
        )
