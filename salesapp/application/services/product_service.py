"""
Product Service
===============

Application service that coordinates product-related operations.
"""
import logging
from decimal import Decimal
from typing import List, Optional

from salesapp.application.use_cases.product.register_product import RegisterProductUseCase
from salesapp.application.use_cases.product.update_product import UpdateProductUseCase
from salesapp.domain.exceptions import NotFoundError
from salesapp.domain.models.product import Product
from salesapp.domain.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Application service for product operations."""

    def __init__(self, product_repository: ProductRepository):
        self._repository = product_repository
        self._register_use_case = RegisterProductUseCase(product_repository)
        self._update_use_case = UpdateProductUseCase(product_repository)

    def register_product(self, name: str, code: str, value: Decimal) -> Product:
        """Register a new product. See RegisterProductUseCase."""
        return self._register_use_case.execute(name=name, code=code, value=value)

    def update_product(self, product_id: int, name: str, code: str, value: Decimal) -> Product:
        """Update an existing product. See UpdateProductUseCase."""
        return self._update_use_case.execute(product_id=product_id, name=name, code=code, value=value)

    def get_product(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            NotFoundError: If the product does not exist
        """
        product = self._repository.find_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def list_products(
        self,
        name: Optional[str] = None,
        code: Optional[str] = None,
        min_value: Optional[Decimal] = None,
        max_value: Optional[Decimal] = None,
    ) -> List[Product]:
        """
        List products ordered by name.

        Args:
            name: Case-insensitive substring of the name
            code: Case-insensitive substring of the code
            min_value: Inclusive lower bound of the value
            max_value: Inclusive upper bound of the value
        """
        name = name.strip() if name and name.strip() else None
        code = code.strip() if code and code.strip() else None
        return self._repository.search(name=name, code=code, min_value=min_value, max_value=max_value)

    def delete_product(self, product_id: int) -> None:
        """
        Delete a product. Existing orders keep their items and price snapshots.

        Raises:
            NotFoundError: If the product does not exist
        """
        if not self._repository.delete(product_id):
            raise NotFoundError("Product not found")
        logger.info("Product %s deleted", product_id)
