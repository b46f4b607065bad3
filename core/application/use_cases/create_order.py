"""
Create Order Use Case.

Flow:
1. Validate the command (customer fields, at least one item)
2. Build OrderItem values and the Order aggregate
3. Save through the repository port
4. Send the confirmation notification
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
from uuid import UUID
import logging

from core.application.interfaces import INotificationService
from core.domain.entities.order import Order
from core.domain.exceptions import InvalidCommandError, NotificationDeliveryError
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import OrderItem


logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST DTOs (Application Layer)
# =============================================================================

@dataclass(frozen=True)
class CreateOrderItem:
    """Item descriptor inside a create command."""
    product_id: UUID
    product_name: str
    price: Decimal
    quantity: int


@dataclass(frozen=True)
class CreateOrderCommand:
    """
    Input for create order use case.

    This is application-level request (not API-level).
    """
    customer_name: str
    customer_email: str
    items: Optional[List[CreateOrderItem]] = field(default_factory=list)


# =============================================================================
# USE CASE
# =============================================================================

class CreateOrderUseCase:
    """
    Use case for placing a new order.

    Persistence always happens before notification. If the notification
    fails the order stays saved and NotificationDeliveryError carries it.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        notification_service: INotificationService,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
            notification_service: Service for sending notifications
        """
        self.order_repository = order_repository
        self.notification_service = notification_service

    async def execute(self, command: CreateOrderCommand) -> Order:
        """
        Execute the create workflow.

        Args:
            command: Customer data and item descriptors

        Returns:
            The persisted order

        Raises:
            InvalidCommandError: Blank customer name/email or no items
            InvalidItemError: An item has quantity <= 0 or price < 0
            NotificationDeliveryError: Confirmation failed after the order was saved
        """
        self._validate(command)

        items = [
            OrderItem(
                product_id=item.product_id,
                product_name=item.product_name,
                price=item.price,
                quantity=item.quantity,
            )
            for item in command.items
        ]

        order = Order.create(
            customer_name=command.customer_name,
            customer_email=command.customer_email,
            items=items,
        )
        logger.info(
            f"[{order.id}] Order created: {len(items)} item(s), total={order.total_amount}"
        )

        saved_order = await self.order_repository.save(order)
        logger.info(f"[{saved_order.id}] ✅ Order saved")

        try:
            await self.notification_service.send_order_confirmation(
                saved_order.customer_email,
                saved_order.id,
                saved_order.total_amount,
            )
        except Exception as e:
            logger.error(
                f"[{saved_order.id}] ❌ Confirmation notification failed "
                f"(order remains saved): {e}"
            )
            raise NotificationDeliveryError(
                f"Order confirmation could not be sent: {e}", order=saved_order
            ) from e

        logger.info(f"[{saved_order.id}] Confirmation notification sent")
        return saved_order

    @staticmethod
    def _validate(command: CreateOrderCommand) -> None:
        if not command.customer_name or not command.customer_name.strip():
            raise InvalidCommandError("Customer name is required")

        if not command.customer_email or not command.customer_email.strip():
            raise InvalidCommandError("Customer email is required")

        if not command.items:
            raise InvalidCommandError("Order must contain at least one item")
