"""
Product Repository Interface
============================

Abstract interface for product data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable, List, Optional

from salesapp.domain.models.product import Product


class ProductRepository(ABC):
    """
    Abstract repository for product persistence operations.

    Implementations must enforce code uniqueness at the store level and
    raise UniqueConstraintViolation when it is violated.
    """

    @abstractmethod
    def create(self, product: Product) -> Product:
        """
        Create a new product.

        Raises:
            UniqueConstraintViolation: If the code is already stored
        """
        pass

    @abstractmethod
    def update(self, product: Product) -> Product:
        """
        Update an existing product.

        Raises:
            UniqueConstraintViolation: If the code belongs to another product
        """
        pass

    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find a product by its ID.

        Returns:
            Product entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_ids(self, product_ids: Iterable[int]) -> List[Product]:
        """
        Load several products in one call.

        Ids with no stored product are silently skipped.
        """
        pass

    @abstractmethod
    def find_by_code(self, code: str) -> Optional[Product]:
        """
        Find a product by exact (case-sensitive) code.

        Returns:
            Product entity if found, None otherwise
        """
        pass

    @abstractmethod
    def search(
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
        pass

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """
        Delete a product.

        Returns:
            True if product was found and deleted, False otherwise
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored products."""
        pass
