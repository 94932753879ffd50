"""Error Handler Middleware"""
from __future__ import annotations

from typing import Callable

import structlog

from portfolio_backend.application.use_cases.message import (
    MessageCreateError,
    MessageDeleteError,
    MessageNotFoundError,
    MessageRetrievalError,
    MessageUpdateError,
)
from portfolio_backend.domain.message.entities import MessageValidationError
from portfolio_backend.presentation.request import (
    InvalidRequestBodyError,
    MethodNotAllowedError,
)
from portfolio_backend.presentation.response import ApiResponse

logger = structlog.get_logger()


def validation_error_handler(exc: Exception) -> ApiResponse:
    """入力検証エラーハンドラ"""
    logger.info("validation_failed", error=str(exc))
    return ApiResponse.error(400, str(exc))


def message_not_found_handler(exc: Exception) -> ApiResponse:
    """メッセージが見つからないエラーハンドラ"""
    logger.info("message_not_found", error=str(exc))
    return ApiResponse.error(404, "Message not found")


def method_not_allowed_handler(exc: Exception) -> ApiResponse:
    """未対応メソッドエラーハンドラ"""
    logger.warning("method_not_allowed", error=str(exc))
    return ApiResponse.error(405, str(exc))


def operation_error_handler(exc: Exception) -> ApiResponse:
    """
    外部サービス (ストア / 通知) 失敗のハンドラ

    ユースケースが汎用メッセージで包んだ例外のみを対象とする。
    原因はログにのみ出力し、レスポンスには含めない。
    """
    logger.error(
        "operation_failed",
        error=str(exc),
        cause=repr(exc.__cause__) if exc.__cause__ else None,
    )
    return ApiResponse.error(500, str(exc))


def generic_error_handler(exc: Exception) -> ApiResponse:
    """汎用エラーハンドラ"""
    logger.error("unhandled_error", error=str(exc), exc_info=exc)
    return ApiResponse.error(500, "Internal server error")


# エラーハンドラのマッピング
error_handlers: dict[type[Exception], Callable[[Exception], ApiResponse]] = {
    MessageValidationError: validation_error_handler,
    InvalidRequestBodyError: validation_error_handler,
    MessageNotFoundError: message_not_found_handler,
    MethodNotAllowedError: method_not_allowed_handler,
    MessageCreateError: operation_error_handler,
    MessageRetrievalError: operation_error_handler,
    MessageUpdateError: operation_error_handler,
    MessageDeleteError: operation_error_handler,
    Exception: generic_error_handler,
}


def handle_error(exc: Exception) -> ApiResponse:
    """例外クラス (MRO 順) に対応するハンドラでレスポンスに変換"""
    for exception_class in type(exc).__mro__:
        handler = error_handlers.get(exception_class)
        if handler:
            return handler(exc)
    return generic_error_handler(exc)
