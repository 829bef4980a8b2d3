"""serialization.py — DynamoDB attribute encoding for todo items."""
from __future__ import annotations

from typing import Any, Dict

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

__all__ = ["_deserialize", "_serialize", "_serialize_item"]

_SER = TypeSerializer()
_DESER = TypeDeserializer()


def _serialize(value: Any) -> Dict[str, Any]:
    return _SER.serialize(value)


def _serialize_item(item: Dict[str, Any]) -> Dict[str, Any]:
    return {k: _serialize(v) for k, v in item.items()}


def _deserialize(item: Dict[str, Any]) -> Dict[str, Any]:
    """Deserialize a DynamoDB item (S/BOOL attributes) to a plain dict."""
    return {k: _DESER.deserialize(v) for k, v in item.items()}
