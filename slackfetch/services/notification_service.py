from __future__ import annotations

import logging

from botocore.exceptions import BotoCoreError, ClientError

from slackfetch.exceptions import NotificationError
from slackfetch.models.notification import Notification

logger = logging.getLogger(__name__)


class NotificationPublisher:
    def __init__(self, client, topic: str) -> None:
        self.client = client
        self.topic = topic

    def publish(self, notification: Notification) -> str:
        """Publish the notification to the topic and return the message id. Raises on failure."""
        if not self.topic:
            raise NotificationError("No notification topic configured")

        message = notification.to_message()
        logger.debug("Sending %s to topic: %s", message, self.topic)
        try:
            response = self.client.publish(TopicArn=self.topic, Message=message)
        except (BotoCoreError, ClientError) as exc:
            raise NotificationError(str(exc)) from exc

        logger.debug("Notification successfully published to %s", self.topic)
        return response.get("MessageId", "")

    def safe_publish(self, notification: Notification) -> str | None:
        """Publish the notification, swallowing any exceptions."""
        try:
            return self.publish(notification)
        except Exception:
            logger.exception("Notification publish to %s failed", self.topic)
            return None
