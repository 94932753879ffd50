"""Dependencies"""
from __future__ import annotations

from functools import lru_cache

from portfolio_backend.application.ports.event_publisher import IEventPublisher
from portfolio_backend.application.ports.repositories import IMessageRepository
from portfolio_backend.infrastructure.config import get_settings
from portfolio_backend.infrastructure.publishers import SNSEventPublisher
from portfolio_backend.infrastructure.repositories import DynamoDBMessageRepository
from portfolio_backend.presentation.dispatcher import RequestDispatcher
from portfolio_backend.presentation.middleware.logging import (
    LoggingMiddleware,
    configure_logging,
)

# プロセス単位で1度だけ生成し、呼び出し間で再利用する


@lru_cache()
def get_message_repository() -> IMessageRepository:
    """Message Repository の依存性注入"""
    settings = get_settings()
    return DynamoDBMessageRepository(
        table_name=settings.messages_table,
        region=settings.aws_region,
        endpoint_url=settings.dynamodb_endpoint_url,
    )


@lru_cache()
def get_event_publisher() -> IEventPublisher:
    """Event Publisher の依存性注入"""
    settings = get_settings()
    return SNSEventPublisher(
        topic_arn=settings.notification_topic_arn,
        subject=settings.notification_subject,
        region=settings.aws_region,
        endpoint_url=settings.sns_endpoint_url,
    )


@lru_cache()
def get_application() -> LoggingMiddleware:
    """ログ設定済みのディスパッチャを取得"""
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        service_name=settings.service_name,
        environment=settings.environment,
    )

    dispatcher = RequestDispatcher(
        message_repository=get_message_repository(),
        event_publisher=get_event_publisher(),
    )
    return LoggingMiddleware(dispatcher)
