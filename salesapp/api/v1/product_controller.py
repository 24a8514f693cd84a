"""
Product Controller
==================

FastAPI controller for product management endpoints.
"""
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Response, status

from salesapp.api.v1.dependencies import get_product_service
from salesapp.api.v1.errors import to_http_exception
from salesapp.application.dto.product_dto import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from salesapp.application.services.product_service import ProductService
from salesapp.domain.constants.limits import MAX_ID
from salesapp.domain.exceptions import DomainError

router = APIRouter(tags=["products"])


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List products",
    description="Get products ordered by name, optionally filtered by name/code substring and value range."
)
def list_products(
    name: Optional[str] = None,
    code: Optional[str] = None,
    min_value: Optional[Decimal] = None,
    max_value: Optional[Decimal] = None,
    service: ProductService = Depends(get_product_service),
) -> List[ProductResponse]:
    """List products with optional filters."""
    products = service.list_products(name=name, code=code, min_value=min_value, max_value=max_value)
    return [ProductResponse.from_entity(product) for product in products]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID",
)
def get_product(
    product_id: int = Path(..., description="Product ID", le=MAX_ID),
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Get a specific product by ID."""
    try:
        return ProductResponse.from_entity(service.get_product(product_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a product",
    description="Register a new product. Returns 409 if the code is already used."
)
def create_product(
    request: ProductCreateRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Register a product."""
    try:
        product = service.register_product(name=request.name, code=request.code, value=request.value)
        return ProductResponse.from_entity(product)
    except DomainError as e:
        raise to_http_exception(e)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update a product",
    description="""
    Update name, code and value.

    A new value only applies to orders created afterwards; existing orders
    keep the unit price they were created with.
    """
)
def update_product(
    request: ProductUpdateRequest,
    product_id: int = Path(..., description="Product ID", le=MAX_ID),
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Update a product."""
    try:
        product = service.update_product(
            product_id=product_id,
            name=request.name,
            code=request.code,
            value=request.value,
        )
        return ProductResponse.from_entity(product)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a product",
)
def delete_product(
    product_id: int = Path(..., description="Product ID", le=MAX_ID),
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    try:
        service.delete_product(product_id)
    except DomainError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
