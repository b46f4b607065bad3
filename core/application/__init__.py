"""Application layer - use cases, interfaces, and DTOs."""

from .dtos import (
    CreateOrderItemRequest,
    CreateOrderRequest,
    OrderDTO,
    OrderItemDTO,
    OrderListDTO,
    UpdateOrderStatusRequest,
)
from .interfaces import INotificationService
from .use_cases import (
    CreateOrderCommand,
    CreateOrderItem,
    CreateOrderUseCase,
    GetOrderUseCase,
    UpdateOrderStatusUseCase,
)

__all__ = [
    # DTOs
    "CreateOrderItemRequest",
    "CreateOrderRequest",
    "OrderDTO",
    "OrderItemDTO",
    "OrderListDTO",
    "UpdateOrderStatusRequest",
    # Use Cases
    "CreateOrderCommand",
    "CreateOrderItem",
    "CreateOrderUseCase",
    "GetOrderUseCase",
    "UpdateOrderStatusUseCase",
    # Interfaces
    "INotificationService",
]
