"""
API v1 Package
===============

Version 1 API controllers.
"""
from .person_controller import router as person_router
from .product_controller import router as product_router
from .order_controller import router as order_router

__all__ = ["person_router", "product_router", "order_router"]
