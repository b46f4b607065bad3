"""
Order Status Enum.

Lifecycle states of an order.
"""
from enum import Enum
from typing import Union

from ..exceptions import InvalidStatusError


class OrderStatus(str, Enum):
    """Order status values."""

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    DELIVERED = "Delivered"

    @classmethod
    def parse(cls, value: Union["OrderStatus", str]) -> "OrderStatus":
        """
        Resolve a status from its name, ignoring case.

        Args:
            value: OrderStatus member or status name (e.g. "confirmed")

        Returns:
            Matching OrderStatus

        Raises:
            InvalidStatusError: If the name is not a known status
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidStatusError(value)

        wanted = value.strip().lower()
        for status in cls:
            if status.value.lower() == wanted:
                return status
        raise InvalidStatusError(value)

    @classmethod
    def parse_update_target(cls, value: Union["OrderStatus", str]) -> "OrderStatus":
        """
        Resolve a status that an existing order may be moved to.

        Pending is the initial state only and is never a valid target.

        Raises:
            InvalidStatusError: If the name is unknown or names Pending
        """
        status = cls.parse(value)
        if status not in UPDATE_TARGETS:
            raise InvalidStatusError(value, reason="is not a valid target for a status update")
        return status


UPDATE_TARGETS = frozenset(
    {OrderStatus.CONFIRMED, OrderStatus.CANCELLED, OrderStatus.DELIVERED}
)
