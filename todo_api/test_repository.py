"""test_repository.py — Tests for TodoRepository and the DynamoDB store.

Repository behaviour runs against MemoryStore; DynamoDBStore is exercised
against a MagicMock client. All locally runnable without AWS credentials.

Run: python3 -m pytest todo_api/test_repository.py -v
"""

from __future__ import annotations

import itertools
import unittest
from unittest.mock import MagicMock

from botocore.exceptions import ClientError

from todo_api.models import CreateTodoInput, Todo
from todo_api.repository import TodoRepository
from todo_api.store import DynamoDBStore, MemoryStore


def _client_error(code="ProvisionedThroughputExceededException", op="PutItem"):
    return ClientError({"Error": {"Code": code, "Message": "boom"}}, op)


class RepositoryCreateTests(unittest.TestCase):
    def setUp(self):
        self.store = MemoryStore()
        self.repo = TodoRepository(self.store)

    def test_create_generates_id_and_defaults_completed(self):
        todo = self.repo.create(CreateTodoInput(title="Buy milk"))
        self.assertTrue(todo.id)
        self.assertEqual(todo.title, "Buy milk")
        self.assertFalse(todo.completed)
        self.assertEqual(self.store.get(todo.id), todo.to_dict())

    def test_same_title_gets_distinct_ids(self):
        a = self.repo.create(CreateTodoInput(title="Same"))
        b = self.repo.create(CreateTodoInput(title="Same"))
        self.assertNotEqual(a.id, b.id)

    def test_id_factory_is_used(self):
        counter = itertools.count(1)
        repo = TodoRepository(self.store, id_factory=lambda: f"todo-{next(counter)}")
        self.assertEqual(repo.create(CreateTodoInput(title="x")).id, "todo-1")
        self.assertEqual(repo.create(CreateTodoInput(title="y")).id, "todo-2")

    def test_store_failure_propagates(self):
        store = MagicMock()
        store.put.side_effect = _client_error()
        with self.assertRaises(ClientError):
            TodoRepository(store).create(CreateTodoInput(title="x"))


class RepositoryListTests(unittest.TestCase):
    def setUp(self):
        self.repo = TodoRepository(MemoryStore())

    def test_empty_store(self):
        self.assertEqual(self.repo.list_all(), [])

    def test_lists_all_records(self):
        a = self.repo.create(CreateTodoInput(title="A"))
        b = self.repo.create(CreateTodoInput(title="B"))
        self.assertEqual(set(self.repo.list_all()), {a, b})


class RepositoryMarkCompleteTests(unittest.TestCase):
    def setUp(self):
        self.repo = TodoRepository(MemoryStore())

    def test_marks_existing_todo(self):
        todo = self.repo.create(CreateTodoInput(title="A"))
        updated = self.repo.mark_complete(todo.id)
        self.assertEqual(updated, Todo(id=todo.id, title="A", completed=True))
        self.assertEqual(self.repo.get(todo.id), updated)

    def test_is_idempotent(self):
        todo = self.repo.create(CreateTodoInput(title="A"))
        first = self.repo.mark_complete(todo.id)
        second = self.repo.mark_complete(todo.id)
        self.assertEqual(first, second)
        self.assertTrue(second.completed)

    def test_unknown_id_returns_none(self):
        self.assertIsNone(self.repo.mark_complete("does-not-exist"))


class RepositoryDeleteTests(unittest.TestCase):
    def setUp(self):
        self.repo = TodoRepository(MemoryStore())

    def test_delete_existing_then_missing(self):
        todo = self.repo.create(CreateTodoInput(title="A"))
        self.assertTrue(self.repo.delete(todo.id))
        self.assertEqual(self.repo.list_all(), [])
        self.assertFalse(self.repo.delete(todo.id))

    def test_delete_unknown(self):
        self.assertFalse(self.repo.delete("does-not-exist"))


class DynamoDBStoreTests(unittest.TestCase):
    def setUp(self):
        self.client = MagicMock()
        self.store = DynamoDBStore(table_name="todos-test", client=self.client)

    def test_get_uses_consistent_read(self):
        self.client.get_item.return_value = {
            "Item": {"id": {"S": "a"}, "title": {"S": "t"}, "completed": {"BOOL": False}},
        }
        item = self.store.get("a")
        self.assertEqual(item, {"id": "a", "title": "t", "completed": False})
        self.client.get_item.assert_called_once_with(
            TableName="todos-test", Key={"id": {"S": "a"}}, ConsistentRead=True,
        )

    def test_get_missing(self):
        self.client.get_item.return_value = {}
        self.assertIsNone(self.store.get("nope"))

    def test_put_serializes_item(self):
        self.store.put({"id": "a", "title": "t", "completed": True})
        self.client.put_item.assert_called_once_with(
            TableName="todos-test",
            Item={"id": {"S": "a"}, "title": {"S": "t"}, "completed": {"BOOL": True}},
        )

    def test_scan_follows_pagination(self):
        self.client.scan.side_effect = [
            {"Items": [{"id": {"S": "a"}, "title": {"S": "A"}, "completed": {"BOOL": False}}],
             "LastEvaluatedKey": {"id": {"S": "a"}}},
            {"Items": [{"id": {"S": "b"}, "title": {"S": "B"}, "completed": {"BOOL": True}}]},
        ]
        items = list(self.store.scan_all())
        self.assertEqual([i["id"] for i in items], ["a", "b"])
        second_call = self.client.scan.call_args_list[1]
        self.assertEqual(second_call.kwargs["ExclusiveStartKey"], {"id": {"S": "a"}})

    def test_scan_empty_table(self):
        self.client.scan.return_value = {"Items": []}
        self.assertEqual(list(self.store.scan_all()), [])

    def test_delete_reports_existence_from_old_attributes(self):
        self.client.delete_item.return_value = {"Attributes": {"id": {"S": "a"}}}
        self.assertTrue(self.store.delete("a"))
        self.client.delete_item.assert_called_once_with(
            TableName="todos-test", Key={"id": {"S": "a"}}, ReturnValues="ALL_OLD",
        )

    def test_delete_missing_key(self):
        self.client.delete_item.return_value = {}
        self.assertFalse(self.store.delete("a"))

    def test_repository_over_dynamodb_store(self):
        self.client.get_item.return_value = {
            "Item": {"id": {"S": "a"}, "title": {"S": "t"}, "completed": {"BOOL": False}},
        }
        updated = TodoRepository(self.store).mark_complete("a")
        self.assertTrue(updated.completed)
        put_item = self.client.put_item.call_args.kwargs["Item"]
        self.assertEqual(put_item["completed"], {"BOOL": True})


if __name__ == "__main__":
    unittest.main()
