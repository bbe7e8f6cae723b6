"""
FastAPI application entry point for the todo service.
"""

from __future__ import annotations

from fastapi import FastAPI

from todo_api.config import Settings, get_settings
from todo_api.dependencies import build_todo_service
from todo_api.routes import build_router
from todo_api.service import TodoService


def create_app(
    settings: Settings | None = None, service: TodoService | None = None
) -> FastAPI:
    settings = settings or get_settings()
    service = service or build_todo_service(settings)
    app = FastAPI(title="Todo API", version="0.1.0")
    app.include_router(build_router(service), prefix=settings.api_prefix)
    app.state.todo_service = service
    return app


app = create_app()
