"""
FastAPI Dependencies.

Provides dependency injection for use cases and services.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.interfaces import INotificationService
from core.application.use_cases import (
    CreateOrderUseCase,
    GetOrderUseCase,
    UpdateOrderStatusUseCase,
)
from core.data.repositories import SqlAlchemyOrderRepository
from core.domain.repositories.order_repository import OrderRepository
from core.infrastructure.adapters.notifications.logging_notification_service import LoggingNotificationService
from core.infrastructure.adapters.persistence.in_memory_order_repository import InMemoryOrderRepository
from core.infrastructure.database.config import (
    close_database,
    create_engine,
    create_session_factory,
    init_database,
)
from core.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_engine: Optional[AsyncEngine] = None
_order_repository: Optional[OrderRepository] = None
_notification_service: Optional[INotificationService] = None


# =============================================================================
# OUTPUT ADAPTERS
# =============================================================================

def get_order_repository() -> OrderRepository:
    global _engine, _order_repository

    if _order_repository is None:
        settings = get_app_settings().storage

        if settings.backend == "sqlalchemy":
            _engine = create_engine(settings)
            _order_repository = SqlAlchemyOrderRepository(create_session_factory(_engine))
            logger.info("Created SqlAlchemyOrderRepository instance")
        else:
            _order_repository = InMemoryOrderRepository()
            logger.info("Created InMemoryOrderRepository instance")

    return _order_repository


def get_notification_service() -> INotificationService:
    global _notification_service

    if _notification_service is None:
        settings = get_app_settings().notifications

        if settings.backend == "slack":
            # aiohttp is only imported when Slack is enabled
            from core.infrastructure.adapters.notifications.slack_notification_service import SlackNotificationService
            _notification_service = SlackNotificationService(settings)
            logger.info("Created SlackNotificationService instance")
        else:
            _notification_service = LoggingNotificationService()
            logger.info("Using LoggingNotificationService")

    return _notification_service


# =============================================================================
# USE CASES (stateless, built per request)
# =============================================================================

def get_create_order_use_case(
    repository: OrderRepository = Depends(get_order_repository),
    notification_service: INotificationService = Depends(get_notification_service),
) -> CreateOrderUseCase:
    return CreateOrderUseCase(
        order_repository=repository,
        notification_service=notification_service,
    )


def get_get_order_use_case(
    repository: OrderRepository = Depends(get_order_repository),
) -> GetOrderUseCase:
    return GetOrderUseCase(order_repository=repository)


def get_update_order_status_use_case(
    repository: OrderRepository = Depends(get_order_repository),
    notification_service: INotificationService = Depends(get_notification_service),
) -> UpdateOrderStatusUseCase:
    return UpdateOrderStatusUseCase(
        order_repository=repository,
        notification_service=notification_service,
    )


# =============================================================================
# LIFECYCLE
# =============================================================================

async def init_storage() -> None:
    """Create the storage adapter and, for SQLAlchemy, its tables."""
    get_order_repository()
    if _engine is not None:
        await init_database(_engine)


async def close_storage() -> None:
    """Release database connections, if any."""
    if _engine is not None:
        await close_database(_engine)


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _engine, _order_repository, _notification_service

    _engine = None
    _order_repository = None
    _notification_service = None

    logger.info("Dependencies reset")
