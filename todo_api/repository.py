"""repository.py — Domain operations over a todo store.

The repository owns id generation and the ``completed`` default; handlers
never touch the store directly. Store failures (botocore ``ClientError``,
``BotoCoreError``) propagate to the caller unchanged.
"""
from __future__ import annotations

import logging
import uuid
from typing import Callable, List, Optional

from todo_api.models import CreateTodoInput, Todo

__all__ = ["TodoRepository", "new_todo_id"]

logger = logging.getLogger(__name__)


def new_todo_id() -> str:
    return str(uuid.uuid4())


class TodoRepository:
    def __init__(self, store, id_factory: Callable[[], str] = new_todo_id):
        self._store = store
        self._id_factory = id_factory

    def create(self, data: CreateTodoInput) -> Todo:
        """Persist a new todo with a generated id and ``completed=False``."""
        todo = Todo(id=self._id_factory(), title=data.title, completed=False)
        self._store.put(todo.to_dict())
        logger.info("created todo %s", todo.id)
        return todo

    def list_all(self) -> List[Todo]:
        """Return every todo in the store, in no particular order."""
        return [Todo.from_dict(item) for item in self._store.scan_all()]

    def get(self, todo_id: str) -> Optional[Todo]:
        item = self._store.get(todo_id)
        if item is None:
            return None
        return Todo.from_dict(item)

    def mark_complete(self, todo_id: str) -> Optional[Todo]:
        """Set ``completed=True`` on an existing todo.

        Returns None when the id is unknown. This is a read-then-write with
        no condition on the put: a delete landing between the two calls is
        overwritten and the todo reappears.
        """
        todo = self.get(todo_id)
        if todo is None:
            return None
        updated = todo.mark_completed()
        self._store.put(updated.to_dict())
        logger.info("completed todo %s", todo_id)
        return updated

    def delete(self, todo_id: str) -> bool:
        """Remove a todo. Returns False when there was nothing to remove."""
        removed = self._store.delete(todo_id)
        if removed:
            logger.info("deleted todo %s", todo_id)
        return removed
