from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.modules.notification_settings import NotificationSettings
from core.settings.modules.service_settings import ServiceSettings
from core.settings.modules.storage_settings import StorageSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(extra="ignore")

    service: ServiceSettings
    storage: StorageSettings
    notifications: NotificationSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings(
        service=ServiceSettings(),
        storage=StorageSettings(),
        notifications=NotificationSettings(),
    )
