"""Database models."""

from .base import Base, ExactDecimal, UTCDateTime
from .order_model import OrderItemModel, OrderModel

__all__ = ["Base", "ExactDecimal", "OrderModel", "OrderItemModel", "UTCDateTime"]
