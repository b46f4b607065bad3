from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import OrdersBaseSettings


class ServiceSettings(OrdersBaseSettings):
    """
    General service settings.
    Loaded from .env with exact variable name matching.
    """

    app_name: str = Field("Order Lifecycle API", alias="ORDERS_APP_NAME")
    log_level: str = Field("INFO", alias="ORDERS_LOG_LEVEL")
