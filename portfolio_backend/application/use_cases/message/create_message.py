"""Create Message Use Case"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

import structlog

from portfolio_backend.application.ports.event_publisher import IEventPublisher
from portfolio_backend.application.ports.repositories import IMessageRepository
from portfolio_backend.domain.message.entities import Message
from portfolio_backend.domain.message.events import MessageCreated

logger = structlog.get_logger()


class MessageCreateError(Exception):
    """メッセージ作成エラー"""

    pass


@dataclass
class CreateMessageInput:
    """作成入力DTO"""

    email: str | None
    message: str | None
    subject: str | None = None


@dataclass
class CreateMessageOutput:
    """作成出力DTO"""

    email: str
    timestamp: str


class CreateMessageUseCase:
    """
    メッセージ作成 ユースケース

    1. 入力を検証して Message を作成
    2. ストアに保存（既存レコードは上書き）
    3. MessageCreated イベントを通知チャネルに発行

    保存と発行はトランザクションではない。保存後に発行が失敗した場合、
    レコードは残ったままエラーを返す。
    """

    def __init__(
        self,
        message_repository: IMessageRepository,
        event_publisher: IEventPublisher,
        clock: Callable[[], datetime] | None = None,
    ):
        self._message_repo = message_repository
        self._event_publisher = event_publisher
        self._clock = clock

    async def execute(self, input_data: CreateMessageInput) -> CreateMessageOutput:
        """ユースケースを実行"""
        message = Message.create(
            email=input_data.email,
            message=input_data.message,
            subject=input_data.subject,
            now=self._clock() if self._clock else None,
        )

        log = logger.bind(email=message.email)
        log.info("create_message_started")

        stage = "store"
        try:
            await self._message_repo.save(message)
            log.info("message_saved", timestamp=message.timestamp)

            stage = "notify"
            event = MessageCreated.from_message(message)
            await self._event_publisher.publish(event)
            log.info("message_notification_published", event_id=str(event.event_id))

        except Exception as e:
            log.error("create_message_failed", stage=stage, error=str(e))
            raise MessageCreateError("Could not create message") from e

        log.info("create_message_completed")

        return CreateMessageOutput(email=message.email, timestamp=message.timestamp)
