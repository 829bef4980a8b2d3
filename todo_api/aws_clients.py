"""aws_clients.py — Lazy-singleton DynamoDB client.

The client is created on first use and cached for the lifetime of the
Lambda execution environment, so warm invocations reuse the same connection
pool.
"""
from __future__ import annotations

from typing import Optional

import boto3
from botocore.config import Config

from todo_api.config import DYNAMODB_ENDPOINT_URL, DYNAMODB_REGION

__all__ = ["_get_ddb", "_reset_clients"]

_ddb = None


def _get_ddb(region: Optional[str] = None):
    """Get (or create) the DynamoDB client singleton."""
    global _ddb
    if _ddb is None:
        _ddb = boto3.client(
            "dynamodb",
            region_name=region or DYNAMODB_REGION,
            endpoint_url=DYNAMODB_ENDPOINT_URL,
            config=Config(retries={"max_attempts": 5, "mode": "standard"}),
        )
    return _ddb


def _reset_clients() -> None:
    global _ddb
    _ddb = None
