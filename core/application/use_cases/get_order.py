"""Get Order Use Case."""
from typing import Optional
from uuid import UUID
import logging

from core.domain.entities.order import Order
from core.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


class GetOrderUseCase:
    """Look up a single order. Absence is a normal result, not an error."""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: UUID) -> Optional[Order]:
        """
        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        order = await self.order_repository.get_by_id(order_id)
        if order is None:
            logger.info(f"[{order_id}] Order not found")
        return order
