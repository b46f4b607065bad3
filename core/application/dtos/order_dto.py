"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from core.application.use_cases.create_order import CreateOrderCommand, CreateOrderItem
from core.domain.entities.order import Order
from core.domain.value_objects import OrderItem


class CreateOrderItemRequest(BaseModel):
    """DTO for an item inside a create request.

    Quantity and price rules are enforced by the domain (InvalidItemError),
    not here, so both protocols report them the same way.
    """

    product_id: UUID = Field(..., description="Product identifier")
    product_name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Unit price")
    quantity: int = Field(..., description="Quantity ordered")

    model_config = {"frozen": True}


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    customer_name: str = Field(default="", description="Customer name")
    customer_email: str = Field(default="", description="Customer email address")
    items: List[CreateOrderItemRequest] = Field(default_factory=list, description="Order items")

    model_config = {"frozen": True}

    def to_command(self) -> CreateOrderCommand:
        """Transform the request into the create use case command."""
        return CreateOrderCommand(
            customer_name=self.customer_name,
            customer_email=self.customer_email,
            items=[
                CreateOrderItem(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    price=item.price,
                    quantity=item.quantity,
                )
                for item in self.items
            ],
        )


class UpdateOrderStatusRequest(BaseModel):
    """Request DTO for a status change."""

    status: str = Field(..., description="Target status name (case-insensitive)")

    model_config = {"frozen": True}


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    product_id: UUID = Field(..., description="Product identifier")
    product_name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Unit price")
    quantity: int = Field(..., description="Quantity ordered")

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, item: OrderItem) -> "OrderItemDTO":
        return cls(
            product_id=item.product_id,
            product_name=item.product_name,
            price=item.price,
            quantity=item.quantity,
        )


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    order_id: UUID = Field(..., description="Order identifier")
    customer_name: str = Field(..., description="Customer name")
    customer_email: str = Field(..., description="Customer email address")
    total_amount: Decimal = Field(..., description="Total order amount")
    status: str = Field(..., description="Order status")
    created_at: datetime = Field(..., description="Creation time (UTC)")
    updated_at: Optional[datetime] = Field(None, description="Last status change (UTC)")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, order: Order) -> "OrderDTO":
        """Transform Order domain entity to OrderDTO.

        Args:
            order: Order domain entity

        Returns:
            OrderDTO instance
        """
        return cls(
            order_id=order.id,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            total_amount=order.total_amount,
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[OrderItemDTO.from_domain(item) for item in order.items],
        )


class OrderListDTO(BaseModel):
    """DTO for listing orders."""

    orders: List[OrderDTO] = Field(default_factory=list, description="List of orders")
    total: int = Field(..., ge=0, description="Total count")

    model_config = {"frozen": True}
