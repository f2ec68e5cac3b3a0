import json
import logging
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from slackfetch.exceptions import NotificationError
from slackfetch.models.notification import Notification
from slackfetch.services.notification_service import NotificationPublisher

TOPIC = "arn:aws:sns:us-east-1:000000000000:slack-integrator"


def _client_error() -> ClientError:
    return ClientError({"Error": {"Code": "NotFound", "Message": "Topic does not exist"}}, "Publish")


class TestNotificationPublisher:
    def setup_method(self):
        self.client = MagicMock()
        self.client.publish.return_value = {"MessageId": "msg-1"}
        self.publisher = NotificationPublisher(self.client, TOPIC)
        self.notification = Notification(event_id="e1", channel="C1", error_message="Fetch failed")

    def test_publish_sends_serialized_notification(self):
        message_id = self.publisher.publish(self.notification)

        assert message_id == "msg-1"
        self.client.publish.assert_called_once()
        kwargs = self.client.publish.call_args[1]
        assert kwargs["TopicArn"] == TOPIC
        assert json.loads(kwargs["Message"]) == {
            "eventId": "e1",
            "channel": "C1",
            "errorMessage": "Fetch failed",
        }

    def test_publish_wraps_client_error(self):
        self.client.publish.side_effect = _client_error()

        with pytest.raises(NotificationError, match="Topic does not exist"):
            self.publisher.publish(self.notification)

    def test_publish_without_topic(self):
        publisher = NotificationPublisher(self.client, "")

        with pytest.raises(NotificationError, match="No notification topic configured"):
            publisher.publish(self.notification)
        self.client.publish.assert_not_called()


class TestNotificationPublisherSafePublish:
    def setup_method(self):
        self.client = MagicMock()
        self.publisher = NotificationPublisher(self.client, TOPIC)
        self.notification = Notification(event_id="e1", channel="C1", error_message="boom")

    def test_returns_message_id(self):
        self.client.publish.return_value = {"MessageId": "msg-2"}
        assert self.publisher.safe_publish(self.notification) == "msg-2"

    def test_swallows_publish_failure(self, caplog):
        self.client.publish.side_effect = _client_error()

        with caplog.at_level(logging.ERROR, logger="slackfetch.services.notification_service"):
            result = self.publisher.safe_publish(self.notification)

        assert result is None
        assert f"Notification publish to {TOPIC} failed" in caplog.text

    def test_swallows_unexpected_exception(self):
        self.client.publish.side_effect = RuntimeError("connection reset")
        assert self.publisher.safe_publish(self.notification) is None
