"""config.py — Environment configuration and logging for the todo Lambdas.

Environment variables:
    TODOS_TABLE            default: todos
    DYNAMODB_REGION        default: us-east-1
    DYNAMODB_ENDPOINT_URL  optional, e.g. http://localhost:8000 for DynamoDB Local
    TODOS_STORE            dynamodb (default) | memory
    CORS_ORIGIN            default: *
    LOG_LEVEL              default: INFO
"""
from __future__ import annotations

import logging
import os

__all__ = [
    "CORS_ORIGIN",
    "DYNAMODB_ENDPOINT_URL",
    "DYNAMODB_REGION",
    "LOG_LEVEL",
    "STORE_BACKENDS",
    "TODOS_STORE",
    "TODOS_TABLE",
    "logger",
]

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

TODOS_TABLE = os.environ.get("TODOS_TABLE", "todos")
DYNAMODB_REGION = os.environ.get("DYNAMODB_REGION", "us-east-1")
DYNAMODB_ENDPOINT_URL = os.environ.get("DYNAMODB_ENDPOINT_URL", "") or None
TODOS_STORE = os.environ.get("TODOS_STORE", "dynamodb").strip().lower()
CORS_ORIGIN = os.environ.get("CORS_ORIGIN", "*")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

STORE_BACKENDS = ("dynamodb", "memory")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logger = logging.getLogger()
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
