"""Message Domain Events"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from ..entities.message import Message


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """ドメインイベント基底クラス"""

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def payload(self) -> dict[str, Any]:
        """通知に載せるペイロード"""
        return {}


@dataclass(frozen=True)
class MessageCreated(DomainEvent):
    """メッセージ作成イベント"""

    email: str = ""
    subject: str | None = None
    message: str = ""

    @classmethod
    def from_message(cls, message: "Message") -> MessageCreated:
        return cls(
            email=message.email,
            subject=message.subject,
            message=message.message,
        )

    def payload(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "subject": self.subject,
            "message": self.message,
        }
