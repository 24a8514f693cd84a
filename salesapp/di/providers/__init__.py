"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .person_provider import PersonProvider
from .product_provider import ProductProvider
from .order_provider import OrderProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "PersonProvider",
    "ProductProvider",
    "OrderProvider",
]
