"""
Register Product Use Case
=========================

Business use case for registering a new product.
"""
import logging
from decimal import Decimal

from salesapp.domain.exceptions import ConflictError, UniqueConstraintViolation
from salesapp.domain.models.product import Product
from salesapp.domain.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

CODE_TAKEN = "Code already registered"


class RegisterProductUseCase:
    """
    Use case for registering a product.

    The code must not belong to any other product (case-sensitive).
    """

    def __init__(self, product_repository: ProductRepository):
        """
        Initialize use case with repository.

        Args:
            product_repository: Repository for product persistence
        """
        self._repository = product_repository

    def execute(self, name: str, code: str, value: Decimal) -> Product:
        """
        Execute the register product use case.

        Returns:
            Registered product entity

        Raises:
            ValidationError: If name, code or value are invalid
            ConflictError: If the code is already registered
        """
        product = Product(name=name, code=code, value=value)

        if self._repository.find_by_code(product.code):
            logger.warning("Rejected product registration: code %s already registered", product.code)
            raise ConflictError(CODE_TAKEN)

        try:
            created = self._repository.create(product)
        except UniqueConstraintViolation:
            logger.warning("Rejected product registration: code %s already registered", product.code)
            raise ConflictError(CODE_TAKEN)

        logger.info("Product %s registered (%s)", created.id, created.code)
        return created
