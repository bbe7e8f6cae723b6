"""
Service facade over the todo repository.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from todo_api.db import TodoRecord, TodoRepository

logger = logging.getLogger(__name__)


class TodoNotFoundError(LookupError):
    """Raised when an update targets a todo id that does not exist."""

    def __init__(self, todo_id: int):
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


class TodoService:
    def __init__(self, repository: TodoRepository):
        self.repository = repository

    def get_all_todos(self) -> list[TodoRecord]:
        return self.repository.find_all()

    def get_todo_by_id(self, todo_id: int) -> Optional[TodoRecord]:
        return self.repository.find_by_id(todo_id)

    def create_todo(self, record: TodoRecord) -> TodoRecord:
        created = self.repository.save(replace(record, id=None))
        logger.info("Created todo %s", created.id)
        return created

    def update_todo(self, todo_id: int, details: TodoRecord) -> TodoRecord:
        """
        Overwrite title, description and completed on an existing todo.

        Raises TodoNotFoundError when no todo has the given id.
        """
        existing = self.repository.find_by_id(todo_id)
        if existing is None:
            logger.warning("Update requested for missing todo %s", todo_id)
            raise TodoNotFoundError(todo_id)
        existing.title = details.title
        existing.description = details.description
        existing.completed = details.completed
        updated = self.repository.save(existing)
        logger.info("Updated todo %s", updated.id)
        return updated

    def delete_todo_by_id(self, todo_id: int) -> None:
        self.repository.delete_by_id(todo_id)
        logger.info("Deleted todo %s", todo_id)
