"""
Update Product Use Case
=======================
"""
import logging
from decimal import Decimal

from salesapp.application.use_cases.product.register_product import CODE_TAKEN
from salesapp.domain.exceptions import ConflictError, NotFoundError, UniqueConstraintViolation
from salesapp.domain.models.product import Product
from salesapp.domain.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """
    Use case for updating a product.

    Changing the value only affects orders created afterwards.
    """

    def __init__(self, product_repository: ProductRepository):
        self._repository = product_repository

    def execute(self, product_id: int, name: str, code: str, value: Decimal) -> Product:
        """
        Raises:
            NotFoundError: If the product does not exist
            ValidationError: If name, code or value are invalid
            ConflictError: If the code belongs to another product
        """
        product = self._repository.find_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found")

        product.rename(name)
        product.change_code(code)
        product.change_value(value)

        owner = self._repository.find_by_code(product.code)
        if owner and owner.id != product.id:
            logger.warning("Rejected update of product %s: code %s already registered", product_id, product.code)
            raise ConflictError(CODE_TAKEN)

        try:
            updated = self._repository.update(product)
        except UniqueConstraintViolation:
            logger.warning("Rejected update of product %s: code %s already registered", product_id, product.code)
            raise ConflictError(CODE_TAKEN)

        logger.info("Product %s updated", product_id)
        return updated
