"""Request Dispatcher"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Awaitable, Callable

from pydantic import BaseModel, ValidationError
import structlog

from portfolio_backend.application.ports.event_publisher import IEventPublisher
from portfolio_backend.application.ports.repositories import IMessageRepository
from portfolio_backend.application.use_cases.message import (
    CreateMessageInput,
    CreateMessageUseCase,
    DeleteMessageInput,
    DeleteMessageUseCase,
    GetMessageInput,
    GetMessageUseCase,
    UpdateMessageInput,
    UpdateMessageUseCase,
)
from portfolio_backend.domain.message.entities import MessageValidationError
from portfolio_backend.presentation.middleware.error_handler import handle_error
from portfolio_backend.presentation.request import MessageRequest, MethodNotAllowedError
from portfolio_backend.presentation.response import ApiResponse
from portfolio_backend.presentation.schemas import (
    CreateMessageRequest,
    UpdateMessageRequest,
)

logger = structlog.get_logger()


class Operation(str, Enum):
    """HTTP メソッドから選択される操作"""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    REJECT = "reject"


METHOD_OPERATIONS: dict[str, Operation] = {
    "POST": Operation.CREATE,
    "GET": Operation.READ,
    "PUT": Operation.UPDATE,
    "DELETE": Operation.DELETE,
}


def resolve_operation(method: str | None) -> Operation:
    """メソッド名から操作を決定（未対応は REJECT）"""
    return METHOD_OPERATIONS.get(method or "", Operation.REJECT)


def _parse_body(
    model: type[BaseModel],
    request: MessageRequest,
    error_message: str,
) -> BaseModel:
    try:
        return model.model_validate(request.json_body() or {})
    except ValidationError as e:
        raise MessageValidationError(error_message) from e


class RequestDispatcher:
    """
    リクエストディスパッチャ

    メソッドごとに1つのユースケースを実行し、結果と例外を
    ApiResponse に変換する。ストアと通知の実装は外部から注入する。
    """

    def __init__(
        self,
        message_repository: IMessageRepository,
        event_publisher: IEventPublisher,
        clock: Callable[[], datetime] | None = None,
    ):
        self._create_message = CreateMessageUseCase(message_repository, event_publisher, clock)
        self._get_message = GetMessageUseCase(message_repository)
        self._update_message = UpdateMessageUseCase(message_repository)
        self._delete_message = DeleteMessageUseCase(message_repository)

        self._routes: dict[Operation, Callable[[MessageRequest], Awaitable[ApiResponse]]] = {
            Operation.CREATE: self._handle_create,
            Operation.READ: self._handle_read,
            Operation.UPDATE: self._handle_update,
            Operation.DELETE: self._handle_delete,
            Operation.REJECT: self._handle_reject,
        }

    async def dispatch(self, request: MessageRequest) -> ApiResponse:
        """リクエストを処理してレスポンスを返す（例外は外に出さない）"""
        operation = resolve_operation(request.method)
        logger.info("request_dispatched", operation=operation.value)

        try:
            return await self._routes[operation](request)
        except Exception as exc:
            return handle_error(exc)

    # === Operation Handlers ===

    async def _handle_create(self, request: MessageRequest) -> ApiResponse:
        body = _parse_body(CreateMessageRequest, request, "Email and message are required")

        await self._create_message.execute(
            CreateMessageInput(
                email=body.email,
                message=body.message,
                subject=body.subject,
            )
        )

        return ApiResponse.ok({"success": "Message created and notification sent successfully!"})

    async def _handle_read(self, request: MessageRequest) -> ApiResponse:
        result = await self._get_message.execute(GetMessageInput(email=request.email))
        return ApiResponse.ok(result.item)

    async def _handle_update(self, request: MessageRequest) -> ApiResponse:
        if not request.email:
            raise MessageValidationError("Email and message are required")

        body = _parse_body(UpdateMessageRequest, request, "Email and message are required")

        result = await self._update_message.execute(
            UpdateMessageInput(
                email=request.email,
                message=body.message,
                subject=body.subject,
            )
        )

        return ApiResponse.ok({
            "success": "Message updated successfully!",
            "updatedAttributes": result.updated_attributes,
        })

    async def _handle_delete(self, request: MessageRequest) -> ApiResponse:
        await self._delete_message.execute(DeleteMessageInput(email=request.email))
        return ApiResponse.ok({"success": "Message deleted successfully!"})

    async def _handle_reject(self, request: MessageRequest) -> ApiResponse:
        raise MethodNotAllowedError(request.method)
