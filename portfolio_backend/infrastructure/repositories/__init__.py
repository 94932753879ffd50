"""Repository Implementations"""
from .dynamodb_message_repository import DynamoDBMessageRepository

__all__ = ["DynamoDBMessageRepository"]
