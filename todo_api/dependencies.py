"""
Explicit wiring of repository and service instances.
"""

from __future__ import annotations

from todo_api.config import Settings, get_settings
from todo_api.db import SqlTodoRepository
from todo_api.seed import apply_seed_script
from todo_api.service import TodoService


def build_repository(settings: Settings | None = None) -> SqlTodoRepository:
    """
    Create the repository and seed it when the todos table is empty.
    """
    settings = settings or get_settings()
    repository = SqlTodoRepository(settings.database_url, echo=settings.sql_echo)
    if settings.seed_on_startup:
        apply_seed_script(repository, settings.seed_script_path)
    return repository


def build_todo_service(settings: Settings | None = None) -> TodoService:
    return TodoService(build_repository(settings))
