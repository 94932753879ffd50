"""Message Entities"""
from .message import Message, MessageValidationError, format_timestamp

__all__ = ["Message", "MessageValidationError", "format_timestamp"]
