"""
Sales App
=========

Sales management service: people, products and orders with a
Pending → Paid → Shipped → Received order lifecycle.
"""

__version__ = "1.0.0"
