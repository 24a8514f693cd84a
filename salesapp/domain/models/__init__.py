"""
Domain Models
=============
"""
from .person import Person
from .product import Product
from .order import Order, OrderItem, OrderStatus, PaymentMethod

__all__ = ["Person", "Product", "Order", "OrderItem", "OrderStatus", "PaymentMethod"]
