"""Message Domain Events"""
from .message_events import DomainEvent, MessageCreated

__all__ = ["DomainEvent", "MessageCreated"]
