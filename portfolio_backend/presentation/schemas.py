"""Request Body Models"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CreateMessageRequest(BaseModel):
    """POST ボディ"""

    model_config = ConfigDict(extra="ignore")

    email: str | None = None
    subject: str | None = None
    message: str | None = None


class UpdateMessageRequest(BaseModel):
    """PUT ボディ (email はクエリパラメータから取得)"""

    model_config = ConfigDict(extra="ignore")

    subject: str | None = None
    message: str | None = None
