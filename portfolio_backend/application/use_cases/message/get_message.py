"""Get Message Use Case"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from portfolio_backend.application.ports.repositories import IMessageRepository
from portfolio_backend.domain.message.entities import MessageValidationError

logger = structlog.get_logger()


class MessageNotFoundError(Exception):
    """メッセージが見つからないエラー"""

    pass


class MessageRetrievalError(Exception):
    """メッセージ取得エラー"""

    pass


@dataclass
class GetMessageInput:
    """取得入力DTO"""

    email: str | None


@dataclass
class GetMessageOutput:
    """取得出力DTO（保存されているレコードそのもの）"""

    item: dict[str, Any]


class GetMessageUseCase:
    """
    メッセージ取得 ユースケース

    email をキーにストアから取得する。取得のみで状態は変更しない。
    """

    def __init__(self, message_repository: IMessageRepository):
        self._message_repo = message_repository

    async def execute(self, input_data: GetMessageInput) -> GetMessageOutput:
        """ユースケースを実行"""
        if not input_data.email:
            raise MessageValidationError("Email is required")

        log = logger.bind(email=input_data.email)
        log.info("get_message_started")

        try:
            item = await self._message_repo.find_by_email(input_data.email)
        except Exception as e:
            log.error("get_message_failed", error=str(e))
            raise MessageRetrievalError("Could not retrieve message") from e

        if not item:
            log.warning("message_not_found")
            raise MessageNotFoundError("Message not found")

        log.info("get_message_completed")

        return GetMessageOutput(item=item)
