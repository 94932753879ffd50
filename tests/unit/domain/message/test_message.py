"""Message Entity Unit Tests"""
from datetime import datetime, timedelta, timezone

import pytest

from portfolio_backend.domain.message import Message, MessageCreated, MessageValidationError
from portfolio_backend.domain.message.entities import format_timestamp


class TestMessageCreation:
    """Message 作成のテスト"""

    def test_create_message(self):
        """正常: Message を作成できる"""
        # Arrange
        now = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)

        # Act
        message = Message.create(email="a@b.com", message="hi", subject="Hello", now=now)

        # Assert
        assert message.email == "a@b.com"
        assert message.message == "hi"
        assert message.subject == "Hello"
        assert message.timestamp == "2024-05-01T12:00:00.123Z"

    def test_create_uses_current_time_by_default(self):
        """正常: now 省略時は現在時刻"""
        before = datetime.now(timezone.utc).replace(microsecond=0)

        message = Message.create(email="a@b.com", message="hi")

        stamped = datetime.strptime(message.timestamp, "%Y-%m-%dT%H:%M:%S.%fZ")
        assert stamped.replace(tzinfo=timezone.utc) >= before

    @pytest.mark.parametrize(
        "email, text",
        [(None, "hi"), ("", "hi"), ("a@b.com", None), ("a@b.com", "")],
    )
    def test_create_requires_email_and_message(self, email, text):
        """異常: email / message が空なら作成できない"""
        with pytest.raises(MessageValidationError) as exc_info:
            Message.create(email=email, message=text)

        assert str(exc_info.value) == "Email and message are required"


class TestMessageSerialization:
    """Message 変換のテスト"""

    def test_to_item(self):
        """正常: ストアのアイテム形式に変換できる"""
        message = Message(
            email="a@b.com",
            message="hi",
            timestamp="2024-05-01T12:00:00.000Z",
            subject=None,
        )

        item = message.to_item()

        assert item == {
            "email": "a@b.com",
            "timestamp": "2024-05-01T12:00:00.000Z",
            "subject": None,
            "message": "hi",
        }

    def test_format_timestamp_converts_to_utc(self):
        """正常: UTC 以外のタイムゾーンは UTC に変換"""
        jst = timezone(timedelta(hours=9))

        assert format_timestamp(datetime(2024, 5, 1, 21, 0, tzinfo=jst)) == "2024-05-01T12:00:00.000Z"


class TestMessageCreatedEvent:
    """MessageCreated イベントのテスト"""

    def test_payload_from_message(self):
        """正常: 通知ペイロードは email / subject / message のみ"""
        message = Message.create(email="a@b.com", message="hi", subject="Hello")

        event = MessageCreated.from_message(message)

        assert event.event_type == "MessageCreated"
        assert event.payload() == {"email": "a@b.com", "subject": "Hello", "message": "hi"}
