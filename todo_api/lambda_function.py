"""lambda_function.py — Lambda entry points for the todo API.

Deploy either one function per operation:

    todo_api.lambda_function.create_todo_handler     POST   /todos
    todo_api.lambda_function.list_todos_handler      GET    /todos
    todo_api.lambda_function.complete_todo_handler   PUT    /todos?id=<id>
    todo_api.lambda_function.delete_todo_handler     DELETE /todos?id=<id>

or a single function routed by method:

    todo_api.lambda_function.lambda_handler

The store, repository and handlers are built on first invocation and reused
by every warm invocation of the same execution environment.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from todo_api.config import logger
from todo_api.handlers import (
    CompleteTodoHandler,
    CreateTodoHandler,
    DeleteTodoHandler,
    ListTodosHandler,
    TodoHandler,
)
from todo_api.http_utils import _empty, _error, _path_method
from todo_api.repository import TodoRepository
from todo_api.store import build_store

_HANDLER_CLASSES = (CreateTodoHandler, ListTodosHandler, CompleteTodoHandler, DeleteTodoHandler)

MISSING_METHOD_MESSAGE = "HTTP method is missing"
ROUTER_FAILURE_MESSAGE = "Failed to process request"

_handlers: Optional[Dict[str, TodoHandler]] = None


def _get_handlers() -> Dict[str, TodoHandler]:
    """Get (or build) the method -> handler map sharing one repository."""
    global _handlers
    if _handlers is None:
        repository = TodoRepository(build_store())
        _handlers = {cls.method: cls(repository, logger) for cls in _HANDLER_CLASSES}
    return _handlers


def _reset_handlers() -> None:
    global _handlers
    _handlers = None


def _dispatch(handler_cls, event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    try:
        handler = _get_handlers()[handler_cls.method]
    except Exception as exc:
        logger.exception("Failed to initialise %s: %s", handler_cls.operation, exc)
        return _error(500, handler_cls.failure_message)
    return handler(event, context)


def create_todo_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return _dispatch(CreateTodoHandler, event, context)


def list_todos_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return _dispatch(ListTodosHandler, event, context)


def complete_todo_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return _dispatch(CompleteTodoHandler, event, context)


def delete_todo_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return _dispatch(DeleteTodoHandler, event, context)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Single-function entry point routing by HTTP method.

    Unlike the per-operation entry points, the router cannot infer an
    operation from an event without a method, so it answers 400.
    """
    try:
        method, path = _path_method(event or {})
    except Exception as exc:
        logger.exception("todo_api: unreadable event: %s", exc)
        return _error(500, ROUTER_FAILURE_MESSAGE)

    if not method:
        return _error(400, MISSING_METHOD_MESSAGE)
    if method == "OPTIONS":
        return _empty(204)

    for handler_cls in _HANDLER_CLASSES:
        if handler_cls.method == method:
            return _dispatch(handler_cls, event, context)

    logger.info("todo_api: rejected %s %s", method, path)
    return _error(405, f"Method {method} not allowed")
