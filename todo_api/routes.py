"""
HTTP routes for the todo API.

Routes are declared in ROUTE_TABLE and bound to a TodoService instance
when the router is built.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Response

from todo_api.schemas import TodoPayload, TodoResponse
from todo_api.service import TodoNotFoundError, TodoService

logger = logging.getLogger(__name__)


class TodoHandlers:
    """Request handlers bound to one service instance."""

    def __init__(self, service: TodoService):
        self.service = service

    def list_todos(self) -> list[TodoResponse]:
        return [
            TodoResponse.from_record(record)
            for record in self.service.get_all_todos()
        ]

    def get_todo(self, todo_id: int):
        record = self.service.get_todo_by_id(todo_id)
        if record is None:
            return Response(status_code=404)
        return TodoResponse.from_record(record)

    def create_todo(self, payload: TodoPayload) -> TodoResponse:
        record = self.service.create_todo(payload.to_record())
        return TodoResponse.from_record(record)

    def update_todo(self, todo_id: int, payload: TodoPayload) -> TodoResponse:
        try:
            record = self.service.update_todo(todo_id, payload.to_record())
        except TodoNotFoundError:
            raise HTTPException(status_code=404, detail="Todo not found")
        return TodoResponse.from_record(record)

    def delete_todo(self, todo_id: int) -> Response:
        self.service.delete_todo_by_id(todo_id)
        return Response(status_code=204)


# (method, path, handler, status code, response model)
ROUTE_TABLE: tuple[tuple[str, str, str, int, Optional[Any]], ...] = (
    ("GET", "/todos", "list_todos", 200, list[TodoResponse]),
    ("GET", "/todos/{todo_id}", "get_todo", 200, TodoResponse),
    ("POST", "/todos", "create_todo", 201, TodoResponse),
    ("PUT", "/todos/{todo_id}", "update_todo", 200, TodoResponse),
    ("DELETE", "/todos/{todo_id}", "delete_todo", 204, None),
)


def build_router(service: TodoService) -> APIRouter:
    handlers = TodoHandlers(service)
    router = APIRouter()
    for method, path, name, status_code, response_model in ROUTE_TABLE:
        router.add_api_route(
            path,
            getattr(handlers, name),
            methods=[method],
            status_code=status_code,
            response_model=response_model,
            name=name,
        )
        logger.debug("Registered %s %s -> %s", method, path, name)
    return router
