"""SNS Event Publisher Implementation"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import boto3
from botocore.exceptions import ClientError
import structlog

from portfolio_backend.application.ports.event_publisher import IEventPublisher

if TYPE_CHECKING:
    from portfolio_backend.domain.message.events.message_events import DomainEvent

logger = structlog.get_logger()


class SNSEventPublisher(IEventPublisher):
    """
    SNS Event Publisher

    ドメインイベントのペイロードを JSON として SNS トピックに発行する。
    event_type / occurred_at をメッセージ属性に付与し、サブスクライバ側の
    フィルターポリシーで利用できるようにする。
    """

    def __init__(
        self,
        topic_arn: str,
        subject: str = "New Message Created",
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        client: Any = None,
    ):
        self.topic_arn = topic_arn
        self.subject = subject
        self._client = client or boto3.client(
            "sns",
            region_name=region,
            endpoint_url=endpoint_url,
        )

    async def publish(self, event: "DomainEvent") -> None:
        """イベントを発行"""
        log = logger.bind(
            topic_arn=self.topic_arn,
            event_type=event.event_type,
            event_id=str(event.event_id),
        )

        try:
            response = self._client.publish(
                TopicArn=self.topic_arn,
                Subject=self.subject,
                Message=json.dumps(event.payload()),
                MessageAttributes={
                    "event_type": {
                        "DataType": "String",
                        "StringValue": event.event_type,
                    },
                    "occurred_at": {
                        "DataType": "String",
                        "StringValue": event.occurred_at.isoformat(),
                    },
                },
            )
        except ClientError as e:
            log.error("publish_failed", error=str(e))
            raise

        log.info("publish_completed", message_id=response.get("MessageId"))
