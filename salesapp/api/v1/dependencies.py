"""
Dependency Container
====================

FastAPI dependencies resolving services from the DI container.
Tests replace them through ``app.dependency_overrides``.
"""
from salesapp.application.services.order_service import OrderService
from salesapp.application.services.person_service import PersonService
from salesapp.application.services.product_service import ProductService
from salesapp.di.container import get_container


def get_person_service() -> PersonService:
    """
    Get person service instance (singleton).

    Returns:
        PersonService instance
    """
    return get_container().get(PersonService)


def get_product_service() -> ProductService:
    """
    Get product service instance (singleton).

    Returns:
        ProductService instance
    """
    return get_container().get(ProductService)


def get_order_service() -> OrderService:
    """
    Get order service instance (singleton).

    Returns:
        OrderService instance
    """
    return get_container().get(OrderService)
