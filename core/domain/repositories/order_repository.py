"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional
from uuid import UUID

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """Insert or update an order by its identifier.

        Args:
            order: Order aggregate to persist

        Returns:
            The stored order
        """
        pass

    @abstractmethod
    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Order]:
        """Return every stored order."""
        pass

    @abstractmethod
    async def delete(self, order_id: UUID) -> bool:
        """Remove an order.

        Args:
            order_id: Order identifier

        Returns:
            True if an order was removed, False if none was stored
        """
        pass

    @abstractmethod
    def locked(self, order_id: UUID) -> AsyncContextManager[None]:
        """Serialize read-modify-write sequences for one identifier.

        Usage::

            async with repository.locked(order_id):
                order = await repository.get_by_id(order_id)
                order.confirm()
                await repository.save(order)

        Args:
            order_id: Order identifier to hold exclusively
        """
        pass
