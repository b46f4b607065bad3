"""
Slack Notification Service Implementation.

Sends notifications via Slack Webhook API.
"""
from decimal import Decimal
from uuid import UUID
import asyncio
import logging

import aiohttp

from core.application.interfaces import INotificationService
from core.domain.exceptions import NotificationDeliveryError
from core.settings.modules.notification_settings import NotificationSettings


logger = logging.getLogger(__name__)


class SlackNotificationService(INotificationService):
    """
    Slack implementation of notification service.

    Sends notifications via Slack Webhook API. Delivery failures raise
    NotificationDeliveryError.
    """

    def __init__(self, settings: NotificationSettings):
        """
        Initialize Slack notification service.

        Args:
            settings: Notification settings with webhook URL

        Raises:
            ValueError: If no webhook URL is configured
        """
        if not settings.slack_webhook_url:
            raise ValueError("ORDERS_SLACK_WEBHOOK_URL is required for Slack notifications")
        self.settings = settings
        self.webhook_url = settings.slack_webhook_url
        self.prefix = settings.slack_prefix
        self.timeout = aiohttp.ClientTimeout(total=settings.slack_timeout_seconds)
        logger.info("SlackNotificationService initialized")

    async def send_order_confirmation(
        self,
        email: str,
        order_id: UUID,
        total_amount: Decimal
    ) -> None:
        """Send order confirmation via Slack."""
        text = (
            f"{self.prefix} ✅ *Order confirmed*\n"
            f"Customer: {email}\n"
            f"Order: `{order_id}`\n"
            f"Total: {total_amount:.2f}"
        )
        await self._send_message(text, color="good")

    async def send_order_cancellation(
        self,
        email: str,
        order_id: UUID
    ) -> None:
        """Send order cancellation via Slack."""
        text = (
            f"{self.prefix} ❌ *Order cancelled*\n"
            f"Customer: {email}\n"
            f"Order: `{order_id}`"
        )
        await self._send_message(text, color="danger")

    async def _send_message(self, text: str, color: str = "good") -> None:
        """
        Send message to Slack.

        Args:
            text: Message text
            color: Attachment color (good, warning, danger)

        Raises:
            NotificationDeliveryError: Non-2xx response or transport failure
        """
        payload = {
            "attachments": [
                {
                    "color": color,
                    "text": text,
                    "mrkdwn_in": ["text"],
                }
            ]
        }

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.post(self.webhook_url, json=payload) as response:
                    if response.status >= 300:
                        error_text = await response.text()
                        logger.error(
                            f"Slack API error: {response.status} - {error_text}"
                        )
                        raise NotificationDeliveryError(
                            f"Slack webhook returned {response.status}"
                        )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to send Slack notification: {e}", exc_info=True)
            raise NotificationDeliveryError(f"Slack webhook unreachable: {e}") from e

        logger.info("Slack notification sent successfully")
