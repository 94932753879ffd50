"""Request Descriptor"""
from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any


class MethodNotAllowedError(Exception):
    """未対応の HTTP メソッド"""

    def __init__(self, method: str | None):
        super().__init__(f"Method {method} not allowed")
        self.method = method


class InvalidRequestBodyError(Exception):
    """リクエストボディが JSON として解析できない"""

    pass


@dataclass
class MessageRequest:
    """
    正規化済みリクエスト

    API Gateway プロキシイベント (REST v1 / HTTP API v2) から
    method, email (クエリパラメータ), body を取り出したもの。
    body の解析は json_body() を呼んだ時点で行う。
    """

    method: str | None
    email: str | None = None
    raw_body: Any = None
    is_base64_encoded: bool = False

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> MessageRequest:
        """Lambda イベントから作成"""
        method = event.get("httpMethod") or (
            event.get("requestContext", {}).get("http", {}).get("method")
        )
        params = event.get("queryStringParameters") or {}

        return cls(
            method=method,
            email=params.get("email"),
            raw_body=event.get("body"),
            is_base64_encoded=bool(event.get("isBase64Encoded")),
        )

    def json_body(self) -> dict[str, Any] | None:
        """
        body を JSON オブジェクトとして解析

        Returns:
            解析結果。body が空、またはオブジェクト以外の場合は None

        Raises:
            InvalidRequestBodyError: JSON として解析できない場合
        """
        if self.raw_body is None or self.raw_body == "":
            return None

        body = self.raw_body
        if isinstance(body, str):
            try:
                if self.is_base64_encoded:
                    body = base64.b64decode(body, validate=True).decode("utf-8")
                body = json.loads(body)
            except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
                raise InvalidRequestBodyError("Invalid JSON body") from e

        if not isinstance(body, dict):
            return None
        return body
