"""Delete Message Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from portfolio_backend.application.ports.repositories import IMessageRepository
from portfolio_backend.domain.message.entities import MessageValidationError

logger = structlog.get_logger()


class MessageDeleteError(Exception):
    """メッセージ削除エラー"""

    pass


@dataclass
class DeleteMessageInput:
    """削除入力DTO"""

    email: str | None


class DeleteMessageUseCase:
    """
    メッセージ削除 ユースケース

    物理削除。存在しないキーの削除もエラーにしない（冪等）。
    """

    def __init__(self, message_repository: IMessageRepository):
        self._message_repo = message_repository

    async def execute(self, input_data: DeleteMessageInput) -> None:
        """ユースケースを実行"""
        if not input_data.email:
            raise MessageValidationError("Email is required")

        log = logger.bind(email=input_data.email)
        log.info("delete_message_started")

        try:
            await self._message_repo.delete(input_data.email)
        except Exception as e:
            log.error("delete_message_failed", error=str(e))
            raise MessageDeleteError("Could not delete message") from e

        log.info("delete_message_completed")
