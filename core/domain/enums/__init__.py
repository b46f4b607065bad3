"""Domain enums."""

from .order_status import OrderStatus, UPDATE_TARGETS

__all__ = ["OrderStatus", "UPDATE_TARGETS"]
