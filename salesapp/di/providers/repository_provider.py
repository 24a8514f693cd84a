from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.person_repository import PersonRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.order_repository import OrderRepository
from ...infrastructure.db.mongo_person_repository import MongoPersonRepository
from ...infrastructure.db.mongo_product_repository import MongoProductRepository
from ...infrastructure.db.mongo_order_repository import MongoOrderRepository
from ...infrastructure.memory import (
    InMemoryPersonRepository,
    InMemoryProductRepository,
    InMemoryOrderRepository,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations for the configured storage backend.

        Raises:
            ValueError: If STORAGE_BACKEND is not 'mongo' or 'memory'
        """
        backend = get_settings().storage_backend

        if backend == "memory":
            container.register_singleton(PersonRepository, InMemoryPersonRepository())
            container.register_singleton(ProductRepository, InMemoryProductRepository())
            container.register_singleton(OrderRepository, InMemoryOrderRepository())
            return

        if backend != "mongo":
            raise ValueError(f"Unknown STORAGE_BACKEND '{backend}' (expected 'mongo' or 'memory')")

        # Get MongoDB client from database provider
        mongo_client = container.get("mongo_client")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(PersonRepository, MongoPersonRepository(mongo_client))
        container.register_singleton(ProductRepository, MongoProductRepository(mongo_client))
        container.register_singleton(OrderRepository, MongoOrderRepository(mongo_client))
