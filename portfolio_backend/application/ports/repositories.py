"""Repository Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from portfolio_backend.domain.message.entities import Message


class IMessageRepository(ABC):
    """
    Message Repository Interface

    依存性逆転の原則に従い、ドメイン層から参照可能な抽象インターフェース。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    email 単位の単一キー操作のみを扱う。
    """

    @abstractmethod
    async def save(self, message: Message) -> None:
        """メッセージを保存（同じ email の既存レコードは上書き）"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> dict[str, Any] | None:
        """
        email で保存済みアイテムを取得

        Returns:
            ストアに保存されているアイテムをそのまま返す。存在しない場合は None
        """
        pass

    @abstractmethod
    async def update(
        self,
        email: str,
        message: str,
        subject: str | None,
    ) -> dict[str, Any] | None:
        """
        message / subject を部分更新

        Returns:
            更新後の属性。レコードが存在しない場合は None
        """
        pass

    @abstractmethod
    async def delete(self, email: str) -> None:
        """メッセージを削除（存在しなくてもエラーにしない）"""
        pass
