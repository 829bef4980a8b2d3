"""models.py — Todo record and create-request schema."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional

__all__ = [
    "CreateTodoInput",
    "InvalidRequestError",
    "Todo",
    "parse_create_body",
]


class InvalidRequestError(ValueError):
    """Raised when client input fails validation (maps to HTTP 400)."""


@dataclass(frozen=True)
class Todo:
    id: str
    title: str
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def mark_completed(self) -> "Todo":
        return replace(self, completed=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        """Build a Todo from a plain dict (JSON object or deserialized item).

        Raises ValueError if ``id``/``title`` are not strings or ``completed``
        is not a boolean. Unknown keys are ignored.
        """
        todo_id = data.get("id")
        if not isinstance(todo_id, str) or not todo_id:
            raise ValueError("Todo 'id' must be a non-empty string")
        title = data.get("title")
        if not isinstance(title, str):
            raise ValueError("Todo 'title' must be a string")
        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError("Todo 'completed' must be a boolean")
        return cls(id=todo_id, title=title, completed=completed)

    @classmethod
    def from_json(cls, raw: str) -> "Todo":
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("Todo JSON must be an object")
        return cls.from_dict(data)


@dataclass(frozen=True)
class CreateTodoInput:
    title: str


def parse_create_body(raw: Optional[str]) -> CreateTodoInput:
    """Parse a create request body of the form ``{"title": "..."}``.

    Any ``id`` or ``completed`` supplied by the caller is dropped; both are
    owned by the repository.
    """
    if raw is None or not raw.strip():
        raise InvalidRequestError("Request body is required")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidRequestError(f"Invalid JSON body: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidRequestError("JSON body must be an object")
    title = data.get("title")
    if not isinstance(title, str):
        raise InvalidRequestError("'title' must be a string")
    return CreateTodoInput(title=title)
