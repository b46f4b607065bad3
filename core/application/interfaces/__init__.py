"""Application layer interfaces."""
from abc import ABC, abstractmethod
from decimal import Decimal
from uuid import UUID


class INotificationService(ABC):
    """
    Interface for order lifecycle notifications.

    This interface defines the contract for sending notifications,
    allowing different implementations (log, Slack, email, etc.)

    Implementations raise NotificationDeliveryError when a message
    could not be delivered.
    """

    @abstractmethod
    async def send_order_confirmation(
        self,
        email: str,
        order_id: UUID,
        total_amount: Decimal
    ) -> None:
        """
        Notify the customer that an order was placed.

        Args:
            email: Customer email address
            order_id: Order identifier
            total_amount: Order total
        """
        pass

    @abstractmethod
    async def send_order_cancellation(
        self,
        email: str,
        order_id: UUID
    ) -> None:
        """
        Notify the customer that an order was cancelled.

        Args:
            email: Customer email address
            order_id: Order identifier
        """
        pass


__all__ = ["INotificationService"]
