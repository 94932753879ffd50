"""Message Use Cases"""
from .create_message import (
    CreateMessageInput,
    CreateMessageOutput,
    CreateMessageUseCase,
    MessageCreateError,
)
from .delete_message import (
    DeleteMessageInput,
    DeleteMessageUseCase,
    MessageDeleteError,
)
from .get_message import (
    GetMessageInput,
    GetMessageOutput,
    GetMessageUseCase,
    MessageNotFoundError,
    MessageRetrievalError,
)
from .update_message import (
    MessageUpdateError,
    UpdateMessageInput,
    UpdateMessageOutput,
    UpdateMessageUseCase,
)

__all__ = [
    "CreateMessageInput",
    "CreateMessageOutput",
    "CreateMessageUseCase",
    "MessageCreateError",
    "DeleteMessageInput",
    "DeleteMessageUseCase",
    "MessageDeleteError",
    "GetMessageInput",
    "GetMessageOutput",
    "GetMessageUseCase",
    "MessageNotFoundError",
    "MessageRetrievalError",
    "MessageUpdateError",
    "UpdateMessageInput",
    "UpdateMessageOutput",
    "UpdateMessageUseCase",
]
