"""
In-Memory Product Repository
============================
"""
import copy
import itertools
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from salesapp.domain.constants.product_fields import ProductFields
from salesapp.domain.exceptions import NotFoundError, UniqueConstraintViolation
from salesapp.domain.models.product import Product
from salesapp.domain.repositories.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """Dict-backed ProductRepository."""

    def __init__(self):
        self._rows: Dict[int, Product] = {}
        self._ids = itertools.count(1)

    def _check_unique_code(self, product: Product) -> None:
        for row in self._rows.values():
            if row.code == product.code and row.id != product.id:
                raise UniqueConstraintViolation(ProductFields.CODE, product.code)

    def create(self, product: Product) -> Product:
        self._check_unique_code(product)
        product.id = next(self._ids)
        self._rows[product.id] = copy.copy(product)
        return product

    def update(self, product: Product) -> Product:
        if product.id not in self._rows:
            raise NotFoundError("Product not found")
        self._check_unique_code(product)
        self._rows[product.id] = copy.copy(product)
        return copy.copy(product)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        row = self._rows.get(product_id)
        return copy.copy(row) if row else None

    def find_by_ids(self, product_ids: Iterable[int]) -> List[Product]:
        return [copy.copy(self._rows[pid]) for pid in set(product_ids) if pid in self._rows]

    def find_by_code(self, code: str) -> Optional[Product]:
        for row in self._rows.values():
            if row.code == code:
                return copy.copy(row)
        return None

    def search(
        self,
        name: Optional[str] = None,
        code: Optional[str] = None,
        min_value: Optional[Decimal] = None,
        max_value: Optional[Decimal] = None,
    ) -> List[Product]:
        rows = list(self._rows.values())
        if name:
            rows = [row for row in rows if name.lower() in row.name.lower()]
        if code:
            rows = [row for row in rows if code.lower() in row.code.lower()]
        if min_value is not None:
            rows = [row for row in rows if row.value >= min_value]
        if max_value is not None:
            rows = [row for row in rows if row.value <= max_value]
        return [copy.copy(row) for row in sorted(rows, key=lambda row: row.name)]

    def delete(self, product_id: int) -> bool:
        return self._rows.pop(product_id, None) is not None

    def count(self) -> int:
        return len(self._rows)
