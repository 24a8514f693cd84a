"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- DTO: Pydantic request/response models
- Use Cases: Business operations (create order, change order status, register person, ...)
- Services: Application services that coordinate multiple use cases
"""
