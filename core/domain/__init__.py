"""Domain layer - pure domain models and interfaces."""

from .entities import Order
from .enums import OrderStatus
from .exceptions import (
    InvalidCommandError,
    InvalidItemError,
    InvalidStatusError,
    InvalidTransitionError,
    NotificationDeliveryError,
    OrderDomainError,
    OrderNotFoundError,
)
from .repositories import OrderRepository
from .value_objects import OrderItem

__all__ = [
    "InvalidCommandError",
    "InvalidItemError",
    "InvalidStatusError",
    "InvalidTransitionError",
    "NotificationDeliveryError",
    "Order",
    "OrderDomainError",
    "OrderItem",
    "OrderNotFoundError",
    "OrderRepository",
    "OrderStatus",
]
