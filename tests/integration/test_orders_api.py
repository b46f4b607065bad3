"""Integration tests for the Orders REST endpoints."""

from decimal import Decimal
from uuid import uuid4

from fastapi.testclient import TestClient


def _create(client: TestClient, payload: dict) -> dict:
    response = client.post("/api/orders", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_order_success(test_client: TestClient, order_payload, api_notifications):
    response = test_client.post("/api/orders", json=order_payload)

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["status"] == "Pending"
    assert data["customer_name"] == "Ana"
    assert Decimal(data["total_amount"]) == Decimal("20.00")
    assert data["updated_at"] is None
    assert len(data["items"]) == 1
    assert response.headers["location"] == f"/api/orders/{data['order_id']}"

    assert [n["type"] for n in api_notifications.get_notifications()] == ["confirmation"]


def test_get_order_by_id(test_client: TestClient, order_payload):
    created = _create(test_client, order_payload)

    response = test_client.get(f"/api/orders/{created['order_id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_order_returns_404(test_client: TestClient):
    response = test_client.get(f"/api/orders/{uuid4()}")

    assert response.status_code == 404


def test_malformed_order_id_returns_400(test_client: TestClient):
    response = test_client.get("/api/orders/not-a-uuid")

    assert response.status_code == 400
    assert "not-a-uuid" in response.json()["detail"]


def test_create_with_zero_quantity_returns_400(test_client: TestClient, order_payload, api_repository):
    order_payload["items"][0]["quantity"] = 0

    response = test_client.post("/api/orders", json=order_payload)

    assert response.status_code == 400
    assert response.json()["error"] == "InvalidItemError"
    assert test_client.get("/api/orders").json()["total"] == 0


def test_create_with_negative_price_returns_400(test_client: TestClient, order_payload):
    order_payload["items"][0]["price"] = "-1"

    response = test_client.post("/api/orders", json=order_payload)

    assert response.status_code == 400
    assert "negative" in response.json()["detail"]


def test_create_without_items_returns_400(test_client: TestClient, order_payload):
    order_payload["items"] = []

    response = test_client.post("/api/orders", json=order_payload)

    assert response.status_code == 400
    assert response.json()["error"] == "InvalidCommandError"


def test_create_with_blank_customer_returns_400(test_client: TestClient, order_payload):
    order_payload["customer_name"] = "  "

    response = test_client.post("/api/orders", json=order_payload)

    assert response.status_code == 400


def test_create_with_malformed_item_returns_422(test_client: TestClient, order_payload):
    order_payload["items"][0]["product_id"] = "widget"

    response = test_client.post("/api/orders", json=order_payload)

    assert response.status_code == 422


def test_confirm_then_deliver(test_client: TestClient, order_payload):
    order_id = _create(test_client, order_payload)["order_id"]

    confirmed = test_client.patch(f"/api/orders/{order_id}/status", json={"status": "confirmed"})
    assert confirmed.status_code == 200
    assert confirmed.json()["status"] == "Confirmed"
    assert confirmed.json()["updated_at"] is not None

    delivered = test_client.patch(f"/api/orders/{order_id}/status", json={"status": "Delivered"})
    assert delivered.status_code == 200
    assert delivered.json()["status"] == "Delivered"


def test_cancel_delivered_order_returns_400(test_client: TestClient, order_payload, api_notifications):
    order_id = _create(test_client, order_payload)["order_id"]
    test_client.patch(f"/api/orders/{order_id}/status", json={"status": "Confirmed"})
    test_client.patch(f"/api/orders/{order_id}/status", json={"status": "Delivered"})

    response = test_client.patch(f"/api/orders/{order_id}/status", json={"status": "Cancelled"})

    assert response.status_code == 400
    assert response.json()["error"] == "InvalidTransitionError"
    assert test_client.get(f"/api/orders/{order_id}").json()["status"] == "Delivered"
    assert [n["type"] for n in api_notifications.get_notifications()] == ["confirmation"]


def test_cancel_sends_cancellation(test_client: TestClient, order_payload, api_notifications):
    order_id = _create(test_client, order_payload)["order_id"]

    response = test_client.patch(f"/api/orders/{order_id}/status", json={"status": "Cancelled"})

    assert response.status_code == 200
    assert response.json()["status"] == "Cancelled"
    assert [n["type"] for n in api_notifications.get_notifications()] == ["confirmation", "cancellation"]


def test_update_to_pending_returns_400(test_client: TestClient, order_payload):
    order_id = _create(test_client, order_payload)["order_id"]

    response = test_client.patch(f"/api/orders/{order_id}/status", json={"status": "Pending"})

    assert response.status_code == 400
    assert response.json()["error"] == "InvalidStatusError"


def test_update_unknown_status_returns_400(test_client: TestClient, order_payload):
    order_id = _create(test_client, order_payload)["order_id"]

    response = test_client.patch(f"/api/orders/{order_id}/status", json={"status": "Shipped"})

    assert response.status_code == 400


def test_update_unknown_order_returns_404(test_client: TestClient):
    response = test_client.patch(f"/api/orders/{uuid4()}/status", json={"status": "Confirmed"})

    assert response.status_code == 404
    assert response.json()["error"] == "OrderNotFoundError"


def test_list_orders(test_client: TestClient, order_payload):
    first = _create(test_client, order_payload)
    second = _create(test_client, order_payload)

    response = test_client.get("/api/orders")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert {order["order_id"] for order in data["orders"]} == {first["order_id"], second["order_id"]}


def test_notification_failure_returns_502_with_saved_order(failing_client: TestClient, order_payload):
    response = failing_client.post("/api/orders", json=order_payload)

    assert response.status_code == 502
    body = response.json()
    assert body["error"] == "NotificationDeliveryError"
    saved = failing_client.get(f"/api/orders/{body['order']['order_id']}")
    assert saved.status_code == 200
    assert saved.json()["status"] == "Pending"


def test_health(test_client: TestClient):
    assert test_client.get("/health").json()["status"] == "healthy"

    ready = test_client.get("/health/ready")
    assert ready.status_code == 200
    assert ready.json()["status"] == "ready"


def test_root_lists_endpoints(test_client: TestClient):
    data = test_client.get("/").json()

    assert "POST /rpc" in data["endpoints"]
