"""
Portfolio Backend

ポートフォリオサイトのメッセージ API（サーバレス構成）:
- Lambda ハンドラ (API Gateway プロキシ統合)
- DynamoDB (メッセージ永続化)
- SNS (作成通知)
"""

__version__ = "1.0.0"
