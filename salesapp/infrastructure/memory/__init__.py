"""
In-Memory Repositories
======================

Process-local implementations of the repository interfaces.
Used with STORAGE_BACKEND=memory and by the test suite.
Data is lost when the process exits.
"""
from .memory_person_repository import InMemoryPersonRepository
from .memory_product_repository import InMemoryProductRepository
from .memory_order_repository import InMemoryOrderRepository

__all__ = ["InMemoryPersonRepository", "InMemoryProductRepository", "InMemoryOrderRepository"]
