"""
Product DTO
===========

Pydantic models for product API requests and responses.
"""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from salesapp.domain.models.product import CODE_MAX_LENGTH, NAME_MAX_LENGTH, Product


class ProductWriteRequest(BaseModel):
    """DTO for creating or updating a product."""
    name: str = Field(..., description="Product name", max_length=NAME_MAX_LENGTH)
    code: str = Field(..., description="Unique product code (case-sensitive)", max_length=CODE_MAX_LENGTH)
    value: Decimal = Field(..., description="Unit price", ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Camiseta",
                "code": "CAM-001",
                "value": 59.90
            }
        }
    )

    @field_validator("name", "code")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Value cannot be empty")
        return value.strip()


class ProductCreateRequest(ProductWriteRequest):
    """DTO for creating a product."""


class ProductUpdateRequest(ProductWriteRequest):
    """DTO for updating a product."""


class ProductResponse(BaseModel):
    """DTO for product data."""
    id: int
    name: str
    code: str
    value: float

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(id=product.id, name=product.name, code=product.code, value=float(product.value))
