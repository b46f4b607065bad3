"""Shared fixtures for the order lifecycle test-suite."""

from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from core.application.use_cases import CreateOrderCommand, CreateOrderItem
from core.domain.entities.order import Order
from core.domain.value_objects import OrderItem
from core.infrastructure.adapters.notifications.logging_notification_service import LoggingNotificationService
from core.infrastructure.adapters.persistence.in_memory_order_repository import InMemoryOrderRepository


WIDGET_ID = UUID("11111111-1111-1111-1111-111111111111")
GADGET_ID = UUID("22222222-2222-2222-2222-222222222222")


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    """Fresh in-memory repository."""
    return InMemoryOrderRepository()


@pytest.fixture
def notification_service() -> LoggingNotificationService:
    """Notification service that records what was sent."""
    return LoggingNotificationService()


@pytest.fixture
def widget_item() -> OrderItem:
    return OrderItem(
        product_id=WIDGET_ID,
        product_name="Widget",
        price=Decimal("10.00"),
        quantity=2,
    )


@pytest.fixture
def pending_order(widget_item) -> Order:
    """Pending order for Ana with one Widget line."""
    return Order.create("Ana", "ana@x.com", [widget_item])


@pytest.fixture
def ana_command() -> CreateOrderCommand:
    """Create command: Ana, one line of 2 x Widget @ 10.00."""
    return CreateOrderCommand(
        customer_name="Ana",
        customer_email="ana@x.com",
        items=[
            CreateOrderItem(
                product_id=WIDGET_ID,
                product_name="Widget",
                price=Decimal("10.00"),
                quantity=2,
            )
        ],
    )


@pytest.fixture
def make_item():
    """Factory for OrderItems with a random product id."""

    def _make(price: str = "1.00", quantity: int = 1, name: str = "Item") -> OrderItem:
        return OrderItem(
            product_id=uuid4(),
            product_name=name,
            price=Decimal(price),
            quantity=quantity,
        )

    return _make
