"""Pytest configuration and fixtures for API integration tests."""

from decimal import Decimal
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_notification_service, get_order_repository
from api.main import app
from core.application.interfaces import INotificationService
from core.infrastructure.adapters.notifications.logging_notification_service import LoggingNotificationService
from core.infrastructure.adapters.persistence.in_memory_order_repository import InMemoryOrderRepository


class FailingNotificationService(INotificationService):
    """Notification adapter whose every delivery fails."""

    async def send_order_confirmation(self, email: str, order_id: UUID, total_amount: Decimal) -> None:
        raise ConnectionError("mail relay unavailable")

    async def send_order_cancellation(self, email: str, order_id: UUID) -> None:
        raise ConnectionError("mail relay unavailable")


@pytest.fixture
def api_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def api_notifications() -> LoggingNotificationService:
    return LoggingNotificationService()


@pytest.fixture
def test_client(api_repository, api_notifications) -> TestClient:
    """Create FastAPI test client backed by fresh in-memory adapters."""
    app.dependency_overrides[get_order_repository] = lambda: api_repository
    app.dependency_overrides[get_notification_service] = lambda: api_notifications

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(api_repository) -> TestClient:
    """Test client whose notification adapter always fails."""
    app.dependency_overrides[get_order_repository] = lambda: api_repository
    app.dependency_overrides[get_notification_service] = lambda: FailingNotificationService()

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture
def order_payload() -> dict:
    return {
        "customer_name": "Ana",
        "customer_email": "ana@x.com",
        "items": [
            {
                "product_id": "11111111-1111-1111-1111-111111111111",
                "product_name": "Widget",
                "price": "10.00",
                "quantity": 2,
            }
        ],
    }
