"""Response Descriptor"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


def _json_default(value: Any) -> Any:
    # DynamoDB の数値は Decimal で返る
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


@dataclass
class ApiResponse:
    """正規化済みレスポンス (statusCode + JSON body)"""

    status_code: int
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def ok(cls, body: dict[str, Any]) -> ApiResponse:
        return cls(status_code=200, body=body)

    @classmethod
    def error(cls, status_code: int, message: str) -> ApiResponse:
        return cls(status_code=status_code, body={"error": message})

    def to_lambda(self, headers: dict[str, str] | None = None) -> dict[str, Any]:
        """API Gateway レスポンス形式"""
        merged = {"Content-Type": "application/json"}
        if headers:
            merged.update(headers)
        merged.update(self.headers)

        return {
            "statusCode": self.status_code,
            "headers": merged,
            "body": json.dumps(self.body, ensure_ascii=False, default=_json_default),
        }
