"""
Update Order Status Use Case.

Flow:
1. Resolve the target status (Pending and unknown names are rejected)
2. Load the order under the repository's per-order lock
3. Apply the matching aggregate transition
4. Save the order
5. Notify the customer when the order was cancelled
"""
from typing import Callable, Dict, Union
from uuid import UUID
import logging

from core.application.interfaces import INotificationService
from core.domain.entities.order import Order
from core.domain.enums.order_status import OrderStatus
from core.domain.exceptions import (
    InvalidTransitionError,
    NotificationDeliveryError,
    OrderNotFoundError,
)
from core.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


_TRANSITIONS: Dict[OrderStatus, Callable[[Order], None]] = {
    OrderStatus.CONFIRMED: Order.confirm,
    OrderStatus.CANCELLED: Order.cancel,
    OrderStatus.DELIVERED: Order.mark_delivered,
}


class UpdateOrderStatusUseCase:
    """
    Use case for moving an order through its lifecycle.

    The load / transition / save sequence runs inside
    ``order_repository.locked(order_id)`` so concurrent updates of the
    same order cannot overwrite each other.
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

    async def execute(
        self,
        order_id: UUID,
        target_status: Union[OrderStatus, str],
    ) -> Order:
        """
        Execute the status update.

        Args:
            order_id: Order identifier
            target_status: Confirmed, Cancelled or Delivered (member or
                case-insensitive name)

        Returns:
            The persisted order

        Raises:
            InvalidStatusError: Unknown status name or Pending requested
            OrderNotFoundError: No order with this identifier
            InvalidTransitionError: The state machine rejected the change
            NotificationDeliveryError: Cancellation notice failed after saving
        """
        target = OrderStatus.parse_update_target(target_status)

        async with self.order_repository.locked(order_id):
            order = await self.order_repository.get_by_id(order_id)
            if order is None:
                logger.warning(f"[{order_id}] Status update rejected: order not found")
                raise OrderNotFoundError(order_id)

            previous_status = order.status
            try:
                _TRANSITIONS[target](order)
            except InvalidTransitionError as e:
                logger.warning(f"[{order_id}] Status update rejected: {e}")
                raise

            saved_order = await self.order_repository.save(order)
            logger.info(
                f"[{order_id}] ✅ Status changed: {previous_status.value} -> {target.value}"
            )

            if target is OrderStatus.CANCELLED:
                await self._notify_cancellation(saved_order)

        return saved_order

    async def _notify_cancellation(self, order: Order) -> None:
        try:
            await self.notification_service.send_order_cancellation(
                order.customer_email,
                order.id,
            )
        except Exception as e:
            logger.error(
                f"[{order.id}] ❌ Cancellation notification failed "
                f"(order remains cancelled): {e}"
            )
            raise NotificationDeliveryError(
                f"Order cancellation notice could not be sent: {e}", order=order
            ) from e
        logger.info(f"[{order.id}] Cancellation notification sent")
