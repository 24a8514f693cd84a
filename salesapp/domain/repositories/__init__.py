"""
Repository Interfaces
=====================
"""
from .person_repository import PersonRepository
from .product_repository import ProductRepository
from .order_repository import OrderRepository

__all__ = ["PersonRepository", "ProductRepository", "OrderRepository"]
