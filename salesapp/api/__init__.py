"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- v1 controllers: FastAPI route handlers for people, products and orders
- Dependencies: Dependency injection setup
- Errors: Domain error to HTTP status mapping
"""
