"""
Test settings loading from the environment.

Every section reads its exact ORDERS_* variable names; unset variables
fall back to the documented defaults.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

# Import api.dependencies so dotenv loads exactly once (canonical location).
import api.dependencies  # noqa: F401

from core.settings import (
    NotificationSettings,
    ServiceSettings,
    StorageSettings,
    get_app_settings,
)


ORDERS_VARS = [
    "ORDERS_APP_NAME",
    "ORDERS_LOG_LEVEL",
    "ORDERS_STORAGE_BACKEND",
    "ORDERS_DATABASE_URL",
    "ORDERS_DATABASE_ECHO",
    "ORDERS_NOTIFICATIONS_BACKEND",
    "ORDERS_SLACK_WEBHOOK_URL",
    "ORDERS_SLACK_PREFIX",
    "ORDERS_SLACK_TIMEOUT_SECONDS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ORDERS_VARS:
        monkeypatch.delenv(name, raising=False)
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def test_defaults():
    settings = get_app_settings()

    assert settings.service.log_level == "INFO"
    assert settings.storage.backend == "memory"
    assert settings.storage.database_url == "sqlite+aiosqlite:///./orders.db"
    assert settings.storage.echo_sql is False
    assert settings.notifications.backend == "log"
    assert settings.notifications.slack_prefix == "[orders]"
    assert settings.notifications.slack_timeout_seconds == 10.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ORDERS_APP_NAME", "Shop Orders")
    monkeypatch.setenv("ORDERS_STORAGE_BACKEND", "sqlalchemy")
    monkeypatch.setenv("ORDERS_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("ORDERS_DATABASE_ECHO", "true")
    monkeypatch.setenv("ORDERS_NOTIFICATIONS_BACKEND", "slack")
    monkeypatch.setenv("ORDERS_SLACK_WEBHOOK_URL", "https://hooks.slack.com/services/T/B/X")

    settings = get_app_settings()

    assert settings.service.app_name == "Shop Orders"
    assert settings.storage.backend == "sqlalchemy"
    assert settings.storage.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.storage.echo_sql is True
    assert settings.notifications.backend == "slack"
    assert settings.notifications.slack_webhook_url.startswith("https://hooks.slack.com/")


def test_settings_are_cached():
    assert get_app_settings() is get_app_settings()


def test_fields_accept_python_names():
    settings = StorageSettings(backend="sqlalchemy", database_url="sqlite+aiosqlite:///:memory:")

    assert settings.backend == "sqlalchemy"


def test_unknown_storage_backend_is_rejected(monkeypatch):
    monkeypatch.setenv("ORDERS_STORAGE_BACKEND", "redis")

    with pytest.raises(ValidationError):
        StorageSettings()


def test_unknown_notifications_backend_is_rejected():
    with pytest.raises(ValidationError):
        NotificationSettings(backend="telegram")


def test_slack_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        NotificationSettings(slack_timeout_seconds=0)


def test_every_field_has_an_orders_alias():
    for model in (ServiceSettings, StorageSettings, NotificationSettings):
        for name, field in model.model_fields.items():
            assert field.alias and field.alias.startswith("ORDERS_"), f"{model.__name__}.{name}"
