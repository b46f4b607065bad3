"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional, Tuple
from uuid import UUID, uuid4

from ..enums.order_status import OrderStatus
from ..exceptions import InvalidTransitionError
from ..value_objects import OrderItem


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """
    Order aggregate root.

    The total amount is computed once from the items when the order is
    created and never recomputed. Status only changes through
    confirm(), cancel() and mark_delivered().
    """
    id: UUID
    customer_name: str
    customer_email: str
    items: Tuple[OrderItem, ...]
    total_amount: Decimal
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.items = tuple(self.items)

    @classmethod
    def create(
        cls,
        customer_name: str,
        customer_email: str,
        items: Iterable[OrderItem],
    ) -> 'Order':
        """
        Factory method to create a new Order.

        Customer fields are validated by the create use case, not here.

        Args:
            customer_name: Customer name
            customer_email: Customer email address
            items: Line items (already validated)

        Returns:
            New Pending order with a fresh identifier
        """
        items = tuple(items)
        return cls(
            id=uuid4(),
            customer_name=customer_name,
            customer_email=customer_email,
            items=items,
            total_amount=sum((item.subtotal for item in items), Decimal("0")),
            status=OrderStatus.PENDING,
            created_at=utcnow(),
            updated_at=None,
        )

    def confirm(self) -> None:
        """Business rule: only Pending orders can be confirmed."""
        if self.status != OrderStatus.PENDING:
            raise InvalidTransitionError(self.status, OrderStatus.CONFIRMED)
        self._transition_to(OrderStatus.CONFIRMED)

    def cancel(self) -> None:
        """Business rule: delivered orders cannot be cancelled."""
        if self.status == OrderStatus.DELIVERED:
            raise InvalidTransitionError(self.status, OrderStatus.CANCELLED)
        self._transition_to(OrderStatus.CANCELLED)

    def mark_delivered(self) -> None:
        """Business rule: only Confirmed orders can be delivered."""
        if self.status != OrderStatus.CONFIRMED:
            raise InvalidTransitionError(self.status, OrderStatus.DELIVERED)
        self._transition_to(OrderStatus.DELIVERED)

    def _transition_to(self, status: OrderStatus) -> None:
        self.status = status
        self.updated_at = utcnow()
