"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Entities: Person, Product, Order and OrderItem
- Enums: OrderStatus (with its transition table) and PaymentMethod
- Repository Interfaces: Abstract contracts for data access
- Exceptions: NotFoundError, ConflictError, ValidationError
"""
