# Settings modules
from .app_settings import AppSettings, get_app_settings
from .notification_settings import NotificationSettings
from .service_settings import ServiceSettings
from .storage_settings import StorageSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "NotificationSettings",
    "ServiceSettings",
    "StorageSettings",
]
