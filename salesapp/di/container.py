# Standard library imports
import logging

# Local application imports
from salesapp.core.config import get_settings
from salesapp.domain.repositories.person_repository import PersonRepository
from salesapp.domain.repositories.product_repository import ProductRepository
from salesapp.infrastructure.seed import seed_database
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    PersonProvider,
    ProductProvider,
    OrderProvider,
)

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (PersonProvider, ProductProvider, OrderProvider) - depend on repositories
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        # Step 1: Register database connections (foundation)
        DatabaseProvider.register(self)

        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)

        # Step 3: Register services (depends on repositories)
        PersonProvider.register(self)
        ProductProvider.register(self)
        OrderProvider.register(self)

    def initialize_storage(self) -> None:
        """Create indexes and, when enabled, insert the seed data."""
        for repository in self.instances.values():
            ensure_indexes = getattr(repository, "ensure_indexes", None)
            if callable(ensure_indexes):
                ensure_indexes()

        if get_settings().seed_on_startup:
            seed_database(self.get(PersonRepository), self.get(ProductRepository))

    def shutdown(self) -> None:
        """Release database connections."""
        if self.has("mongo_client"):
            self.get("mongo_client").close()


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
        logger.info("DI container created (storage backend: %s)", get_settings().storage_backend)
    return _container
