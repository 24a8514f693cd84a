"""
Order DTO
=========

Pydantic models for order API requests and responses.
"""
from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from salesapp.domain.constants.limits import MAX_ID, MAX_QUANTITY
from salesapp.domain.models.order import Order, OrderStatus, PaymentMethod


class OrderItemRequest(BaseModel):
    """One requested product/quantity pair. The same product may appear more than once."""
    product_id: int = Field(..., description="Product ID", gt=0, le=MAX_ID)
    quantity: int = Field(..., description="Quantity", gt=0, le=MAX_QUANTITY)


class OrderCreateRequest(BaseModel):
    """DTO for creating an order."""
    person_id: int = Field(..., description="Customer (person) ID", gt=0, le=MAX_ID)
    payment_method: PaymentMethod = Field(PaymentMethod.CASH, description="Cash, Card or BankSlip")
    items: List[OrderItemRequest] = Field(..., description="Requested items", min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "person_id": 1,
                "payment_method": "Card",
                "items": [
                    {"product_id": 1, "quantity": 2},
                    {"product_id": 2, "quantity": 1}
                ]
            }
        }
    )


class OrderItemResponse(BaseModel):
    """DTO for an order line item. ``product_name`` is resolved at read time."""
    id: int
    product_id: int
    product_name: str
    quantity: int
    unit_price: float
    subtotal: float


class OrderResponse(BaseModel):
    """DTO for order data. ``total`` is computed from the items."""
    id: int
    person_id: int
    created_at: datetime
    payment_method: PaymentMethod
    status: OrderStatus
    items: List[OrderItemResponse]
    total: float

    @classmethod
    def from_entity(cls, order: Order, product_names: Dict[int, str]) -> "OrderResponse":
        """
        Build the order view.

        Args:
            order: Order entity
            product_names: Current product names by id; missing products
                are shown as "Product <id>"
        """
        return cls(
            id=order.id,
            person_id=order.person_id,
            created_at=order.created_at,
            payment_method=order.payment_method,
            status=order.status,
            items=[
                OrderItemResponse(
                    id=item.id,
                    product_id=item.product_id,
                    product_name=product_names.get(item.product_id, f"Product {item.product_id}"),
                    quantity=item.quantity,
                    unit_price=float(item.unit_price),
                    subtotal=float(item.subtotal),
                )
                for item in order.items
            ],
            total=float(order.total),
        )
