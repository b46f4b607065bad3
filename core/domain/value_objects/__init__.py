"""Domain value objects."""

from .order_item import OrderItem

__all__ = [
    "OrderItem",
]
