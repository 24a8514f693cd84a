"""
Domain Exceptions
=================

Error taxonomy shared by the domain and application layers.
The API layer maps them onto HTTP status codes:

- NotFoundError   -> 404
- ConflictError   -> 409
- ValidationError -> 400
"""


class DomainError(Exception):
    """Base class for all business rule errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """A referenced entity does not exist."""


class ConflictError(DomainError):
    """The request is well-formed but violates a uniqueness or state-ordering rule."""


class ValidationError(DomainError):
    """Malformed input (empty name, invalid CPF, non-positive quantity, negative price)."""


class UniqueConstraintViolation(Exception):
    """
    Raised by repositories when the store rejects a write because of a unique index.

    Services translate it into ConflictError.
    """

    def __init__(self, field: str, value: object):
        super().__init__(f"Duplicate value for '{field}': {value!r}")
        self.field = field
        self.value = value
