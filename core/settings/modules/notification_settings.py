from __future__ import annotations

from typing import Literal

from pydantic import Field

from core.settings.base_settings import OrdersBaseSettings


class NotificationSettings(OrdersBaseSettings):
    """
    Customer notification settings.

    ``log`` writes notifications to the application log; ``slack`` posts
    them to an incoming webhook.
    """

    backend: Literal["log", "slack"] = Field("log", alias="ORDERS_NOTIFICATIONS_BACKEND")
    slack_webhook_url: str = Field("", alias="ORDERS_SLACK_WEBHOOK_URL")
    slack_prefix: str = Field("[orders]", alias="ORDERS_SLACK_PREFIX")
    slack_timeout_seconds: float = Field(10.0, gt=0, alias="ORDERS_SLACK_TIMEOUT_SECONDS")
