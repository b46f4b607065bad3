"""
End-to-End Demo: Order Lifecycle

This demonstrates the complete workflow:
1. Create an order (confirmation notification)
2. Reject an invalid order
3. Confirm and deliver
4. Cancel an order (cancellation notification)
5. Try to cancel a delivered order

Uses the in-memory repository and logging notifications (no database needed).
"""
import asyncio
import logging
from decimal import Decimal
from uuid import uuid4

from core.application.use_cases import (
    CreateOrderCommand,
    CreateOrderItem,
    CreateOrderUseCase,
    GetOrderUseCase,
    UpdateOrderStatusUseCase,
)
from core.domain.exceptions import OrderDomainError
from core.infrastructure.adapters.notifications.logging_notification_service import LoggingNotificationService
from core.infrastructure.adapters.persistence.in_memory_order_repository import InMemoryOrderRepository
from core.infrastructure.logging import configure_logging


logger = logging.getLogger(__name__)


def _banner(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80 + "\n")


def _command(quantity: int = 2) -> CreateOrderCommand:
    return CreateOrderCommand(
        customer_name="Ana",
        customer_email="ana@example.com",
        items=[
            CreateOrderItem(
                product_id=uuid4(),
                product_name="Widget",
                price=Decimal("10.00"),
                quantity=quantity,
            )
        ],
    )


async def main():
    configure_logging("INFO")

    repository = InMemoryOrderRepository()
    notifications = LoggingNotificationService()

    create_order = CreateOrderUseCase(repository, notifications)
    get_order = GetOrderUseCase(repository)
    update_status = UpdateOrderStatusUseCase(repository, notifications)

    _banner("1. CREATE ORDER")
    order = await create_order.execute(_command())
    print(f"✅ Order {order.id}: {order.status.value}, total={order.total_amount}")

    _banner("2. INVALID ORDER")
    try:
        await create_order.execute(_command(quantity=0))
    except OrderDomainError as e:
        print(f"❌ Rejected: {e}")

    _banner("3. CONFIRM AND DELIVER")
    await update_status.execute(order.id, "Confirmed")
    delivered = await update_status.execute(order.id, "Delivered")
    print(f"✅ Order {delivered.id}: {delivered.status.value}")

    _banner("4. CANCEL A NEW ORDER")
    second = await create_order.execute(_command(quantity=1))
    cancelled = await update_status.execute(second.id, "Cancelled")
    print(f"✅ Order {cancelled.id}: {cancelled.status.value}")

    _banner("5. CANCEL A DELIVERED ORDER")
    try:
        await update_status.execute(order.id, "Cancelled")
    except OrderDomainError as e:
        print(f"❌ Rejected: {e}")

    stored = await get_order.execute(order.id)
    print(f"\n📦 Stored status: {stored.status.value}")
    print(f"🔔 Notifications sent: {len(notifications.get_notifications())}")
    for notification in notifications.get_notifications():
        print(f"   - {notification['type']} -> {notification['email']}")


if __name__ == "__main__":
    asyncio.run(main())
