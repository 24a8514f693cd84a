"""
Order Controller
================

FastAPI controller for orders and their status lifecycle.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from salesapp.api.v1.dependencies import get_order_service
from salesapp.api.v1.errors import to_http_exception
from salesapp.application.dto.order_dto import OrderCreateRequest, OrderResponse
from salesapp.application.services.order_service import OrderService
from salesapp.domain.constants.limits import MAX_ID
from salesapp.domain.exceptions import DomainError
from salesapp.domain.models.order import OrderStatus

router = APIRouter(tags=["orders"])


@router.get(
    "",
    response_model=List[OrderResponse],
    summary="List orders",
    description="Get orders newest first, optionally filtered by status or person_id."
)
def list_orders(
    status_filter: Optional[OrderStatus] = Query(None, alias="status"),
    person_id: Optional[int] = Query(None, le=MAX_ID),
    service: OrderService = Depends(get_order_service),
) -> List[OrderResponse]:
    """List orders with optional filters."""
    return service.list_orders(status=status_filter, person_id=person_id)


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Get order by ID",
)
def get_order(
    order_id: int = Path(..., description="Order ID", le=MAX_ID),
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Get a specific order by ID."""
    try:
        return service.get_order(order_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an order",
    description="""
    Create a Pending order.

    1. Items referencing the same product are merged (quantities summed)
    2. Each item stores the product's current value as its unit price
    3. Returns 404 if the person or any product does not exist
    """
)
def create_order(
    request: OrderCreateRequest,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Create an order."""
    try:
        return service.create_order(
            person_id=request.person_id,
            items=[(item.product_id, item.quantity) for item in request.items],
            payment_method=request.payment_method,
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{order_id}/mark-paid",
    response_model=OrderResponse,
    summary="Mark order as paid",
    description="Pending -> Paid. Returns 409 for orders in any other status."
)
def mark_paid(
    order_id: int = Path(..., description="Order ID", le=MAX_ID),
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Mark an order as paid."""
    try:
        return service.mark_paid(order_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{order_id}/mark-shipped",
    response_model=OrderResponse,
    summary="Mark order as shipped",
    description="Paid -> Shipped. Returns 409 for orders in any other status."
)
def mark_shipped(
    order_id: int = Path(..., description="Order ID", le=MAX_ID),
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Mark an order as shipped."""
    try:
        return service.mark_shipped(order_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{order_id}/mark-received",
    response_model=OrderResponse,
    summary="Mark order as received",
    description="Shipped -> Received. Returns 409 for orders in any other status."
)
def mark_received(
    order_id: int = Path(..., description="Order ID", le=MAX_ID),
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Mark an order as received."""
    try:
        return service.mark_received(order_id)
    except DomainError as e:
        raise to_http_exception(e)
