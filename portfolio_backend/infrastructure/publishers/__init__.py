"""Event Publisher Implementations"""
from .sns_event_publisher import SNSEventPublisher

__all__ = ["SNSEventPublisher"]
