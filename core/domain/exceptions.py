"""Order domain exceptions.

Raised where a business rule is violated. Protocol adapters catch these and
translate them into HTTP / RPC error responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

if TYPE_CHECKING:
    from core.domain.entities.order import Order


class OrderDomainError(Exception):
    """Base class for every error raised by the order lifecycle core."""


class InvalidCommandError(OrderDomainError, ValueError):
    """A create request is malformed or incomplete."""


class InvalidItemError(OrderDomainError, ValueError):
    """An order item failed construction-level validation."""


class InvalidStatusError(OrderDomainError, ValueError):
    """A status name is unknown or not allowed for the operation."""

    def __init__(self, value: Any, reason: str = "is not a valid order status") -> None:
        self.value = value
        super().__init__(f"Status '{value}' {reason}")


class InvalidTransitionError(OrderDomainError, ValueError):
    """A status transition was rejected by the state machine."""

    def __init__(self, current: Any, target: Any) -> None:
        self.current = current
        self.target = target
        current_name = getattr(current, "value", current)
        target_name = getattr(target, "value", target)
        super().__init__(
            f"Cannot change order status from {current_name} to {target_name}"
        )


class OrderNotFoundError(OrderDomainError, LookupError):
    """The referenced order does not exist."""

    def __init__(self, order_id: UUID) -> None:
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class NotificationDeliveryError(OrderDomainError):
    """
    A notification could not be delivered.

    When raised from a use case the order has already been persisted;
    it is attached as ``order`` so callers never lose it.
    """

    def __init__(self, message: str, order: Optional["Order"] = None) -> None:
        self.order = order
        super().__init__(message)
