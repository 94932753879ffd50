"""Message Domain Module"""
from .entities.message import Message, MessageValidationError
from .events.message_events import DomainEvent, MessageCreated

__all__ = [
    "Message",
    "MessageValidationError",
    "DomainEvent",
    "MessageCreated",
]
