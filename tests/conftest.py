"""Shared Test Fixtures"""
from __future__ import annotations

import asyncio
import json
from datetime import datetime, timezone
from typing import Any, Callable

import pytest
from botocore.exceptions import ClientError

from portfolio_backend.application.ports.event_publisher import IEventPublisher
from portfolio_backend.application.ports.repositories import IMessageRepository
from portfolio_backend.domain.message.entities import Message
from portfolio_backend.presentation.dispatcher import RequestDispatcher
from portfolio_backend.presentation.request import MessageRequest

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def client_error(operation: str, code: str = "ProvisionedThroughputExceededException") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": "boom"}}, operation)


class InMemoryMessageRepository(IMessageRepository):
    """
    インメモリ Message Repository

    fail_on に操作名 (save / find_by_email / update / delete) を入れると
    その操作で ClientError を送出する。
    """

    def __init__(self) -> None:
        self.items: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []
        self.fail_on: set[str] = set()

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise client_error(operation)

    async def save(self, message: Message) -> None:
        self._record("save")
        self.items[message.email] = message.to_item()

    async def find_by_email(self, email: str) -> dict[str, Any] | None:
        self._record("find_by_email")
        item = self.items.get(email)
        return dict(item) if item else None

    async def update(self, email: str, message: str, subject: str | None) -> dict[str, Any] | None:
        self._record("update")
        if email not in self.items:
            return None
        self.items[email].update(message=message, subject=subject)
        return {"message": message, "subject": subject}

    async def delete(self, email: str) -> None:
        self._record("delete")
        self.items.pop(email, None)


class RecordingEventPublisher(IEventPublisher):
    """発行されたイベントを記録する Publisher"""

    def __init__(self) -> None:
        self.events: list[Any] = []
        self.fail = False

    async def publish(self, event: Any) -> None:
        if self.fail:
            raise client_error("Publish", code="AuthorizationError")
        self.events.append(event)


@pytest.fixture
def repository() -> InMemoryMessageRepository:
    return InMemoryMessageRepository()


@pytest.fixture
def publisher() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest.fixture
def dispatcher(repository, publisher) -> RequestDispatcher:
    return RequestDispatcher(repository, publisher, clock=lambda: FIXED_NOW)


@pytest.fixture
def call(dispatcher) -> Callable[..., tuple[int, dict[str, Any]]]:
    """ディスパッチャを呼び出し (status_code, body) を返す"""

    def _call(method: str | None, email: str | None = None, body: Any = None):
        raw_body = json.dumps(body) if body is not None else None
        request = MessageRequest(method=method, email=email, raw_body=raw_body)
        response = asyncio.run(dispatcher.dispatch(request))
        return response.status_code, response.body

    return _call
