"""Message Entity"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 (ミリ秒精度, UTC, Z サフィックス) に整形"""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MessageValidationError(Exception):
    """入力検証エラー"""

    pass


@dataclass
class Message:
    """
    メッセージ（エンティティ）

    email をパーティションキーとする唯一のエンティティ。
    同じ email への作成は既存レコードを上書きする（last-write-wins）。
    """

    email: str
    message: str
    timestamp: str
    subject: str | None = None

    # === Factory Methods ===

    @classmethod
    def create(
        cls,
        email: str | None,
        message: str | None,
        subject: str | None = None,
        now: datetime | None = None,
    ) -> Message:
        """新しい Message を作成（timestamp は作成時刻）"""
        if not email or not message:
            raise MessageValidationError("Email and message are required")

        return cls(
            email=email,
            message=message,
            subject=subject,
            timestamp=format_timestamp(now or _utc_now()),
        )

    # === Serialization ===

    def to_item(self) -> dict[str, Any]:
        """ストアのアイテム形式に変換"""
        return {
            "email": self.email,
            "timestamp": self.timestamp,
            "subject": self.subject,
            "message": self.message,
        }
