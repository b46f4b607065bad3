"""
Logging Notification Service Implementation.

Writes notifications to the application log instead of delivering them.
"""
from decimal import Decimal
from typing import Any, Dict, List
from uuid import UUID
import logging

from core.application.interfaces import INotificationService


logger = logging.getLogger(__name__)


class LoggingNotificationService(INotificationService):
    """
    Console/log implementation of notification service.

    Every notification is also kept in memory so tests and demos can
    inspect what was sent.
    """

    def __init__(self):
        """Initialize logging notification service."""
        self.notifications_sent: List[Dict[str, Any]] = []
        logger.info("LoggingNotificationService initialized (console logging)")

    async def send_order_confirmation(
        self,
        email: str,
        order_id: UUID,
        total_amount: Decimal
    ) -> None:
        """
        Log an order confirmation.

        Args:
            email: Customer email address
            order_id: Order identifier
            total_amount: Order total
        """
        self.notifications_sent.append({
            "type": "confirmation",
            "email": email,
            "order_id": order_id,
            "total_amount": total_amount,
        })

        logger.info(
            f"✅ 🔔 ORDER CONFIRMATION:\n"
            f"   To: {email}\n"
            f"   Order: {order_id}\n"
            f"   Total: {total_amount:.2f}"
        )

    async def send_order_cancellation(
        self,
        email: str,
        order_id: UUID
    ) -> None:
        """
        Log an order cancellation.

        Args:
            email: Customer email address
            order_id: Order identifier
        """
        self.notifications_sent.append({
            "type": "cancellation",
            "email": email,
            "order_id": order_id,
        })

        logger.info(
            f"❌ 🔔 ORDER CANCELLED:\n"
            f"   To: {email}\n"
            f"   Order: {order_id}"
        )

    def get_notifications(self) -> List[Dict[str, Any]]:
        """Get all sent notifications (for testing)."""
        return self.notifications_sent

    def clear(self) -> None:
        """Clear notifications (for testing)."""
        self.notifications_sent.clear()
