"""SNSEventPublisher Unit Tests"""
import asyncio
import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from portfolio_backend.domain.message import MessageCreated
from portfolio_backend.infrastructure.publishers import SNSEventPublisher

TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:Messagenotification"


class TestSNSEventPublisher:
    """SNSEventPublisher のテスト"""

    def test_publish_message_created(self):
        """正常: ペイロードを JSON にして固定の件名で発行する"""
        # Arrange
        client = MagicMock()
        client.publish.return_value = {"MessageId": "msg-1"}
        publisher = SNSEventPublisher(topic_arn=TOPIC_ARN, client=client)
        event = MessageCreated(email="a@b.com", subject="Hello", message="hi")

        # Act
        asyncio.run(publisher.publish(event))

        # Assert
        kwargs = client.publish.call_args.kwargs
        assert kwargs["TopicArn"] == TOPIC_ARN
        assert kwargs["Subject"] == "New Message Created"
        assert json.loads(kwargs["Message"]) == {
            "email": "a@b.com",
            "subject": "Hello",
            "message": "hi",
        }
        assert kwargs["MessageAttributes"]["event_type"]["StringValue"] == "MessageCreated"

    def test_publish_includes_occurred_at(self):
        """正常: 発生時刻をメッセージ属性に付与する"""
        client = MagicMock()
        client.publish.return_value = {"MessageId": "msg-1"}
        publisher = SNSEventPublisher(topic_arn=TOPIC_ARN, client=client)
        occurred_at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        event = MessageCreated(occurred_at=occurred_at, email="a@b.com", message="hi")

        asyncio.run(publisher.publish(event))

        attributes = client.publish.call_args.kwargs["MessageAttributes"]
        assert attributes["occurred_at"] == {
            "DataType": "String",
            "StringValue": "2024-05-01T12:00:00+00:00",
        }

    def test_client_error_propagates(self):
        """異常: ClientError はそのまま送出"""
        client = MagicMock()
        client.publish.side_effect = ClientError(
            {"Error": {"Code": "NotFound", "Message": "Topic does not exist"}}, "Publish"
        )
        publisher = SNSEventPublisher(topic_arn=TOPIC_ARN, client=client)

        with pytest.raises(ClientError):
            asyncio.run(publisher.publish(MessageCreated(email="a@b.com", message="hi")))
