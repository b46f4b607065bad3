# Settings package
from core.settings.modules import (
    AppSettings,
    NotificationSettings,
    ServiceSettings,
    StorageSettings,
    get_app_settings,
)

__all__ = [
    "get_app_settings",
    "AppSettings",
    "NotificationSettings",
    "ServiceSettings",
    "StorageSettings",
]
