"""handlers.py — API Gateway handlers, one per todo operation.

Routes:
    POST   /            — Create a todo from {"title": "..."}
    GET    /            — List all todos
    PUT    /?id=<id>    — Mark a todo complete
    DELETE /?id=<id>    — Delete a todo
    OPTIONS /           — CORS preflight

Each handler holds a reference to a shared TodoRepository and never raises:
any fault is logged and turned into a 500 with a fixed error body.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from todo_api.http_utils import _empty, _error, _path_method, _query_param, _raw_body, _response
from todo_api.models import InvalidRequestError, parse_create_body
from todo_api.repository import TodoRepository

__all__ = [
    "CompleteTodoHandler",
    "CreateTodoHandler",
    "DeleteTodoHandler",
    "ListTodosHandler",
    "MISSING_ID_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "TodoHandler",
]

MISSING_ID_MESSAGE = "'id' query parameter is missing"
NOT_FOUND_MESSAGE = "Todo not found"


class TodoHandler:
    """Base handler: method check, CORS preflight and the 500 fault barrier.

    Subclasses set ``method``, ``operation`` and ``failure_message`` and
    implement ``handle``.
    """

    method = ""
    operation = ""
    failure_message = "Internal service error"

    def __init__(self, repository: TodoRepository, logger: Optional[logging.Logger] = None):
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    def __call__(self, event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
        try:
            event = event or {}
            method, path = _path_method(event)
            self.logger.info("%s: %s %s", self.operation, method or self.method, path)

            if method == "OPTIONS":
                return _empty(204)
            if method and method != self.method:
                return _error(405, f"Method {method} not allowed")

            return self.handle(event)
        except InvalidRequestError as exc:
            return _error(400, str(exc))
        except Exception as exc:
            self.logger.exception("Error handling %s: %s", self.operation, exc)
            return _error(500, self.failure_message)

    def handle(self, event: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def _require_id(self, event: Dict[str, Any]) -> str:
        todo_id = _query_param(event, "id")
        if todo_id is None:
            raise InvalidRequestError(MISSING_ID_MESSAGE)
        return todo_id


class CreateTodoHandler(TodoHandler):
    method = "POST"
    operation = "create_todo"
    failure_message = "Failed to create todo"

    def handle(self, event: Dict[str, Any]) -> Dict[str, Any]:
        data = parse_create_body(_raw_body(event))
        todo = self.repository.create(data)
        return _response(201, todo.to_dict())


class ListTodosHandler(TodoHandler):
    method = "GET"
    operation = "list_todos"
    failure_message = "Failed to retrieve todos"

    def handle(self, event: Dict[str, Any]) -> Dict[str, Any]:
        todos = self.repository.list_all()
        return _response(200, [todo.to_dict() for todo in todos])


class CompleteTodoHandler(TodoHandler):
    method = "PUT"
    operation = "complete_todo"
    failure_message = "Failed to update todo"

    def handle(self, event: Dict[str, Any]) -> Dict[str, Any]:
        todo_id = self._require_id(event)
        todo = self.repository.mark_complete(todo_id)
        if todo is None:
            return _error(404, NOT_FOUND_MESSAGE)
        return _response(200, todo.to_dict())


class DeleteTodoHandler(TodoHandler):
    method = "DELETE"
    operation = "delete_todo"
    failure_message = "Failed to delete todo"

    def handle(self, event: Dict[str, Any]) -> Dict[str, Any]:
        todo_id = self._require_id(event)
        if not self.repository.delete(todo_id):
            return _error(404, NOT_FOUND_MESSAGE)
        return _empty(204)
