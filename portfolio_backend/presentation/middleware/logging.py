"""Logging Middleware"""
from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from portfolio_backend.presentation.dispatcher import RequestDispatcher
    from portfolio_backend.presentation.request import MessageRequest
    from portfolio_backend.presentation.response import ApiResponse

logger = structlog.get_logger()


def _add_service_context(service_name: str, environment: str):
    """全ログに service / environment を付与するプロセッサ"""

    def processor(_logger, _method_name, event_dict):
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def configure_logging(
    log_level: str = "INFO",
    service_name: str = "portfolio-backend",
    environment: str = "development",
) -> None:
    """構造化ログを設定"""
    level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _add_service_context(service_name, environment),
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
    )


class LoggingMiddleware:
    """
    リクエスト/レスポンス ログミドルウェア

    12-Factor App の Logs 原則に従い、
    構造化されたログをイベントストリームとして出力する。
    Lambda の呼び出し単位で request_id をコンテキストに設定する。
    """

    def __init__(self, dispatcher: "RequestDispatcher"):
        self._dispatcher = dispatcher

    async def dispatch(
        self,
        request: "MessageRequest",
        request_id: str | None = None,
    ) -> "ApiResponse":
        request_id = request_id or str(uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        logger.info(
            "request_started",
            method=request.method,
        )

        response = await self._dispatcher.dispatch(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "request_completed",
            method=request.method,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        response.headers["X-Request-ID"] = request_id

        return response
