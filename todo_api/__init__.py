"""todo_api — Todo record service for AWS Lambda + DynamoDB.

Provides:
    - Todo record model and create-body parsing
    - DynamoDB and in-memory stores
    - TodoRepository domain operations
    - API Gateway request handlers (create, list, complete, delete)
"""

__version__ = "1.0.0"
