"""
Domain error to HTTP status mapping, and route handler shape.
"""
import inspect

import pytest

from salesapp.api.v1 import order_router, person_router, product_router
from salesapp.api.v1.errors import to_http_exception
from salesapp.domain.exceptions import ConflictError, DomainError, NotFoundError, ValidationError


class TestToHttpException:
    @pytest.mark.parametrize(
        "error, status_code",
        [
            (NotFoundError("Person not found"), 404),
            (ConflictError("CPF already registered"), 409),
            (ValidationError("Invalid CPF"), 400),
            (DomainError("Rule broken"), 400),
        ],
    )
    def test_status_by_error_type(self, error, status_code):
        exc = to_http_exception(error)
        assert exc.status_code == status_code
        assert exc.detail == error.message


class TestRouteHandlers:
    @pytest.mark.parametrize("router", [person_router, product_router, order_router])
    def test_handlers_are_plain_functions(self, router):
        # Repository calls block, so handlers run in the threadpool
        for route in router.routes:
            assert not inspect.iscoroutinefunction(route.endpoint), route.path
