"""store.py — Key-value stores for todo items, keyed by ``id``.

Both stores speak plain dicts (``{"id", "title", "completed"}``) and share
the same contract:

    get(id)       -> item or None
    put(item)     -> upsert by id
    scan_all()    -> iterator over every item; each call issues a fresh scan
    delete(id)    -> True if an item existed and was removed
"""
from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, Iterator, Optional

from todo_api.aws_clients import _get_ddb
from todo_api.config import STORE_BACKENDS, TODOS_STORE, TODOS_TABLE
from todo_api.serialization import _deserialize, _serialize, _serialize_item

__all__ = ["DynamoDBStore", "MemoryStore", "build_store"]

logger = logging.getLogger(__name__)

KEY_ATTRIBUTE = "id"


class DynamoDBStore:
    """Store backed by a DynamoDB table with a string partition key ``id``.

    Point reads are strongly consistent; scans are eventually consistent.
    """

    def __init__(self, table_name: str = TODOS_TABLE, client=None):
        self.table_name = table_name
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = _get_ddb()
        return self._client

    def _key(self, item_id: str) -> Dict[str, Any]:
        return {KEY_ATTRIBUTE: _serialize(item_id)}

    def get(self, item_id: str) -> Optional[Dict[str, Any]]:
        resp = self.client.get_item(
            TableName=self.table_name,
            Key=self._key(item_id),
            ConsistentRead=True,
        )
        raw = resp.get("Item")
        if not raw:
            return None
        return _deserialize(raw)

    def put(self, item: Dict[str, Any]) -> None:
        self.client.put_item(TableName=self.table_name, Item=_serialize_item(item))

    def scan_all(self) -> Iterator[Dict[str, Any]]:
        kwargs: Dict[str, Any] = {"TableName": self.table_name}
        while True:
            resp = self.client.scan(**kwargs)
            for raw in resp.get("Items", []):
                yield _deserialize(raw)
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key

    def delete(self, item_id: str) -> bool:
        # ALL_OLD returns the removed item's attributes, or nothing when the
        # key did not exist, in the same round trip as the delete.
        resp = self.client.delete_item(
            TableName=self.table_name,
            Key=self._key(item_id),
            ReturnValues="ALL_OLD",
        )
        return bool(resp.get("Attributes"))


class MemoryStore:
    """Process-local store for tests and local runs."""

    def __init__(self):
        self._items: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def get(self, item_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            item = self._items.get(item_id)
            return copy.deepcopy(item) if item is not None else None

    def put(self, item: Dict[str, Any]) -> None:
        with self._lock:
            self._items[item[KEY_ATTRIBUTE]] = copy.deepcopy(item)

    def scan_all(self) -> Iterator[Dict[str, Any]]:
        with self._lock:
            snapshot = [copy.deepcopy(item) for item in self._items.values()]
        return iter(snapshot)

    def delete(self, item_id: str) -> bool:
        with self._lock:
            return self._items.pop(item_id, None) is not None


def build_store(backend: str = TODOS_STORE):
    """Build the store selected by ``TODOS_STORE``."""
    if backend not in STORE_BACKENDS:
        raise ValueError(
            f"Unknown TODOS_STORE '{backend}'; expected one of {', '.join(STORE_BACKENDS)}"
        )
    logger.info("todo store backend: %s", backend)
    if backend == "memory":
        return MemoryStore()
    return DynamoDBStore()
