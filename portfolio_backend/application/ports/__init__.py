"""Application Ports (Interfaces)"""
from .repositories import IMessageRepository
from .event_publisher import IEventPublisher

__all__ = [
    "IMessageRepository",
    "IEventPublisher",
]
