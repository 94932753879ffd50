"""Update Message Use Case"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from portfolio_backend.application.ports.repositories import IMessageRepository
from portfolio_backend.domain.message.entities import MessageValidationError

from .get_message import MessageNotFoundError

logger = structlog.get_logger()


class MessageUpdateError(Exception):
    """メッセージ更新エラー"""

    pass


@dataclass
class UpdateMessageInput:
    """更新入力DTO"""

    email: str | None
    message: str | None
    subject: str | None = None


@dataclass
class UpdateMessageOutput:
    """更新出力DTO"""

    updated_attributes: dict[str, Any]


class UpdateMessageUseCase:
    """
    メッセージ更新 ユースケース

    message と subject のみを更新する。email / timestamp は変更しない。
    subject が指定されない場合は null で上書きする。
    存在しないレコードは作成せず MessageNotFoundError とする。
    """

    def __init__(self, message_repository: IMessageRepository):
        self._message_repo = message_repository

    async def execute(self, input_data: UpdateMessageInput) -> UpdateMessageOutput:
        """ユースケースを実行"""
        if not input_data.email or not input_data.message:
            raise MessageValidationError("Email and message are required")

        log = logger.bind(email=input_data.email)
        log.info("update_message_started")

        try:
            attributes = await self._message_repo.update(
                email=input_data.email,
                message=input_data.message,
                subject=input_data.subject,
            )
        except Exception as e:
            log.error("update_message_failed", error=str(e))
            raise MessageUpdateError("Could not update message") from e

        if attributes is None:
            log.warning("message_not_found")
            raise MessageNotFoundError("Message not found")

        log.info("update_message_completed", attributes=sorted(attributes))

        return UpdateMessageOutput(updated_attributes=attributes)
