"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import AsyncContextManager, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.domain.entities.order import Order
from core.domain.repositories.order_repository import OrderRepository
from core.infrastructure.locks import KeyedLock

from ..mappers import OrderMapper
from ..models.order_model import OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Every call runs in its own session and commits before returning.
    ``locked()`` serializes updates of one order within this process.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._locks = KeyedLock()

    async def save(self, order: Order) -> Order:
        """Insert or update an order.

        Args:
            order: Order domain aggregate

        Returns:
            The order as stored
        """
        async with self._session_factory() as session:
            async with session.begin():
                existing = await session.get(OrderModel, str(order.id))

                if existing:
                    model = OrderMapper.update_persistence(order, existing)
                else:
                    model = OrderMapper.to_persistence(order)
                    session.add(model)

                await session.flush()
                stored = OrderMapper.to_domain(model)

        logger.info(f"Order saved: {order.id} (status: {order.status.value})")
        return stored

    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        async with self._session_factory() as session:
            result = await session.execute(
                select(OrderModel).where(OrderModel.order_id == str(order_id))
            )
            model = result.scalar_one_or_none()

            if not model:
                return None

            return OrderMapper.to_domain(model)

    async def get_all(self) -> List[Order]:
        """Return every stored order, oldest first."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(OrderModel).order_by(OrderModel.created_at)
            )
            return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def delete(self, order_id: UUID) -> bool:
        """Remove an order and its items.

        Args:
            order_id: Order identifier

        Returns:
            True if an order was removed
        """
        async with self._session_factory() as session:
            async with session.begin():
                model = await session.get(OrderModel, str(order_id))
                if model is None:
                    return False
                await session.delete(model)

        logger.info(f"Order deleted: {order_id}")
        return True

    def locked(self, order_id: UUID) -> AsyncContextManager[None]:
        return self._locks.acquire(order_id)
