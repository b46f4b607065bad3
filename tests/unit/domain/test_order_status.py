"""Tests for OrderStatus parsing."""
import pytest

from core.domain.enums.order_status import OrderStatus
from core.domain.exceptions import InvalidStatusError


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Pending", OrderStatus.PENDING),
        ("confirmed", OrderStatus.CONFIRMED),
        ("CANCELLED", OrderStatus.CANCELLED),
        ("  delivered ", OrderStatus.DELIVERED),
    ],
)
def test_parse_is_case_insensitive(name, expected):
    assert OrderStatus.parse(name) is expected


def test_parse_accepts_members():
    assert OrderStatus.parse(OrderStatus.CONFIRMED) is OrderStatus.CONFIRMED


@pytest.mark.parametrize("name", ["", "shipped", "Confirm", "1", None, 1])
def test_parse_rejects_unknown_names(name):
    with pytest.raises(InvalidStatusError):
        OrderStatus.parse(name)


@pytest.mark.parametrize("name", ["Confirmed", "cancelled", "DELIVERED"])
def test_update_targets(name):
    assert OrderStatus.parse_update_target(name) in {
        OrderStatus.CONFIRMED,
        OrderStatus.CANCELLED,
        OrderStatus.DELIVERED,
    }


@pytest.mark.parametrize("name", ["Pending", "pending", OrderStatus.PENDING])
def test_pending_is_not_an_update_target(name):
    with pytest.raises(InvalidStatusError, match="not a valid target"):
        OrderStatus.parse_update_target(name)


def test_status_names_match_values():
    assert [status.value for status in OrderStatus] == [
        "Pending",
        "Confirmed",
        "Cancelled",
        "Delivered",
    ]
