"""DynamoDB Message Repository Implementation"""
from __future__ import annotations

from typing import Any

import boto3
from botocore.exceptions import ClientError
import structlog

from portfolio_backend.application.ports.repositories import IMessageRepository
from portfolio_backend.domain.message.entities import Message

logger = structlog.get_logger()


class DynamoDBMessageRepository(IMessageRepository):
    """
    DynamoDB ベースの Message Repository

    テーブル設計:
    - PK: email (String)
    - 属性: timestamp, subject, message
    """

    def __init__(
        self,
        table_name: str = "Messages",
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        table: Any = None,
    ):
        self.table_name = table_name
        if table is None:
            dynamodb = boto3.resource(
                "dynamodb",
                region_name=region,
                endpoint_url=endpoint_url,
            )
            table = dynamodb.Table(table_name)
        self._table = table

    async def save(self, message: Message) -> None:
        """メッセージを保存（上書き）"""
        log = logger.bind(table=self.table_name, email=message.email)

        try:
            self._table.put_item(Item=message.to_item())
        except ClientError as e:
            log.error("put_item_failed", error=str(e))
            raise

        log.info("put_item_completed")

    async def find_by_email(self, email: str) -> dict[str, Any] | None:
        """
        email で保存済みアイテムを取得

        Returns:
            ストアに保存されているアイテムをそのまま返す。存在しない場合は None
        """
        log = logger.bind(table=self.table_name, email=email)

        try:
            response = self._table.get_item(Key={"email": email})
        except ClientError as e:
            log.error("get_item_failed", error=str(e))
            raise

        item = response.get("Item")
        if not item:
            log.info("item_not_found")
            return None

        return item

    async def update(
        self,
        email: str,
        message: str,
        subject: str | None,
    ) -> dict[str, Any] | None:
        """
        message / subject を部分更新

        attribute_exists 条件付きで更新するため、存在しないキーに
        email / timestamp を持たない部分レコードが作られることはない。

        Returns:
            更新後の属性 (UPDATED_NEW)。レコードが存在しない場合は None
        """
        log = logger.bind(table=self.table_name, email=email)

        try:
            response = self._table.update_item(
                Key={"email": email},
                UpdateExpression="SET #message = :message, #subject = :subject",
                ConditionExpression="attribute_exists(#email)",
                ExpressionAttributeNames={
                    "#email": "email",
                    "#message": "message",
                    "#subject": "subject",
                },
                ExpressionAttributeValues={
                    ":message": message,
                    ":subject": subject,
                },
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                log.info("update_target_not_found")
                return None
            log.error("update_item_failed", error=str(e))
            raise

        attributes = response.get("Attributes", {})
        log.info("update_item_completed")
        return attributes

    async def delete(self, email: str) -> None:
        """メッセージを削除（存在しないキーも成功扱い）"""
        log = logger.bind(table=self.table_name, email=email)

        try:
            self._table.delete_item(Key={"email": email})
        except ClientError as e:
            log.error("delete_item_failed", error=str(e))
            raise

        log.info("delete_item_completed")
