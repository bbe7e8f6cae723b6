"""
Pydantic schemas for the todo API.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from todo_api.db import TodoRecord


class TodoPayload(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = False

    def to_record(self) -> TodoRecord:
        return TodoRecord(
            title=self.title,
            description=self.description,
            completed=bool(self.completed),
        )


class TodoResponse(BaseModel):
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    completed: bool = False

    @classmethod
    def from_record(cls, record: TodoRecord) -> "TodoResponse":
        return cls(**record.as_dict())
