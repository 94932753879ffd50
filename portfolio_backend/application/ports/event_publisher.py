"""Event Publisher Interface (Port)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from portfolio_backend.domain.message.events.message_events import DomainEvent


class IEventPublisher(ABC):
    """
    Event Publisher Interface

    ドメインイベントを通知チャネルに発行するための抽象インターフェース。
    具体的な実装（SNS等）はインフラ層で提供する。
    """

    @abstractmethod
    async def publish(self, event: "DomainEvent") -> None:
        """イベントを発行"""
        pass
