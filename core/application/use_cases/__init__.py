"""Application use cases."""

from .create_order import CreateOrderCommand, CreateOrderItem, CreateOrderUseCase
from .get_order import GetOrderUseCase
from .update_order_status import UpdateOrderStatusUseCase

__all__ = [
    "CreateOrderCommand",
    "CreateOrderItem",
    "CreateOrderUseCase",
    "GetOrderUseCase",
    "UpdateOrderStatusUseCase",
]
