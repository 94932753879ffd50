"""
Lambda Handlers for Portfolio Backend

サーバレス構成のエントリポイント:
- Message API (API Gateway → DynamoDB + SNS)
"""
