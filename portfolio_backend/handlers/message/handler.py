"""
Message API Lambda Handler

API Gateway プロキシ統合で呼び出されるメッセージ CRUD ハンドラ:
- POST   /messages           作成 + SNS 通知
- GET    /messages?email=..  取得
- PUT    /messages?email=..  更新 (message / subject)
- DELETE /messages?email=..  削除
"""
import asyncio
from typing import Any

import structlog

from portfolio_backend.infrastructure.config import get_settings
from portfolio_backend.presentation.dependencies import get_application
from portfolio_backend.presentation.request import MessageRequest
from portfolio_backend.presentation.response import ApiResponse

logger = structlog.get_logger()


DEFAULT_CORS_ALLOW_ORIGIN = '*'


def cors_headers(allow_origin: str = DEFAULT_CORS_ALLOW_ORIGIN) -> dict[str, str]:
    """CORS レスポンスヘッダー"""
    return {
        'Access-Control-Allow-Origin': allow_origin,
    }


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    headers = cors_headers()
    try:
        headers = cors_headers(get_settings().cors_allow_origin)
        application = get_application()
        request = MessageRequest.from_event(event)
        request_id = getattr(context, 'aws_request_id', None)

        response = asyncio.run(application.dispatch(request, request_id=request_id))

    except Exception as e:
        logger.exception("handler_error", error=str(e))
        response = ApiResponse.error(500, 'Internal server error')

    return response.to_lambda(headers=headers)
