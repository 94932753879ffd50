"""Application Settings"""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    # Service
    service_name: str = "portfolio-backend"
    environment: str = "development"
    log_level: str = "INFO"

    # AWS
    aws_region: str = "us-east-1"

    # DynamoDB
    messages_table: str = "Messages"
    dynamodb_endpoint_url: str | None = None

    # SNS
    notification_topic_arn: str = ""
    notification_subject: str = "New Message Created"
    sns_endpoint_url: str | None = None

    # API Gateway Response
    cors_allow_origin: str = "*"

    class Config:
        env_prefix = "PORTFOLIO_"
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
