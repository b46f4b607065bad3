"""
In-Memory Order Repository Implementation.

Instance-owned storage for development, tests and single-process deployments.
"""
from copy import deepcopy
from typing import AsyncContextManager, Dict, List, Optional
from uuid import UUID
import logging

from core.domain.entities.order import Order
from core.domain.repositories.order_repository import OrderRepository
from core.infrastructure.locks import KeyedLock


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Orders are stored as copies: callers only change stored state by
    calling save() again.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[UUID, Order] = {}
        self._locks = KeyedLock()
        logger.info("InMemoryOrderRepository initialized")

    async def save(self, order: Order) -> Order:
        """
        Save order to in-memory storage.

        Args:
            order: Order entity to save

        Returns:
            Copy of the stored order
        """
        self._storage[order.id] = deepcopy(order)
        logger.info(f"Order saved: {order.id} (status: {order.status.value})")
        return deepcopy(order)

    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        """
        Get order by ID from in-memory storage.

        Args:
            order_id: Order ID to lookup

        Returns:
            Order if found, None otherwise
        """
        order = self._storage.get(order_id)
        if order is None:
            logger.debug(f"Order not found: {order_id}")
            return None
        return deepcopy(order)

    async def get_all(self) -> List[Order]:
        """Get all orders, in insertion order."""
        orders = [deepcopy(order) for order in self._storage.values()]
        logger.debug(f"Found {len(orders)} order(s)")
        return orders

    async def delete(self, order_id: UUID) -> bool:
        """
        Delete order from in-memory storage.

        Args:
            order_id: Order ID to delete

        Returns:
            True if the order existed
        """
        if order_id in self._storage:
            del self._storage[order_id]
            logger.info(f"Order deleted: {order_id}")
            return True
        logger.warning(f"Order not found for deletion: {order_id}")
        return False

    def locked(self, order_id: UUID) -> AsyncContextManager[None]:
        return self._locks.acquire(order_id)

    def clear(self) -> None:
        """Clear all orders (for testing)."""
        self._storage.clear()
        logger.info("In-memory repository cleared")
