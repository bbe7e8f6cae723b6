"""
Storage layer for todo records: a repository interface and its SQLAlchemy
implementation.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional, Protocol

from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    String,
    create_engine,
    delete,
    func,
    select,
)
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool


class TodoRepository(Protocol):
    """Interface for todo persistence, keyed by id."""

    def find_all(self) -> list["TodoRecord"]:
        ...

    def find_by_id(self, todo_id: int) -> Optional["TodoRecord"]:
        ...

    def save(self, record: "TodoRecord") -> "TodoRecord":
        ...

    def delete_by_id(self, todo_id: int) -> None:
        ...


@dataclass
class TodoRecord:
    title: Optional[str] = None
    description: Optional[str] = None
    completed: bool = False
    id: Optional[int] = None

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }


def _engine_options(database_url: str) -> dict:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        # One shared connection, otherwise every pooled connection would get
        # its own empty database.
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {"pool_pre_ping": True, "pool_recycle": 1800}


class SqlTodoRepository:
    """
    SQLAlchemy-backed repository. Accepts any SQLAlchemy URL; defaults to an
    in-memory SQLite database that lives as long as the process.
    """

    def __init__(
        self, database_url: str = "sqlite+pysqlite:///:memory:", *, echo: bool = False
    ):
        if not database_url:
            raise ValueError("database_url is required for SqlTodoRepository")
        self.engine = create_engine(
            database_url,
            future=True,
            echo=echo,
            **_engine_options(database_url),
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)
        # In-memory SQLite runs on a single shared connection, so sessions
        # from different request threads must not interleave on it.
        self._lock = threading.RLock()

    def _to_record(self, row: "TodoRow") -> TodoRecord:
        return TodoRecord(
            id=row.id,
            title=row.title,
            description=row.description,
            completed=bool(row.completed),
        )

    @staticmethod
    def _apply(row: "TodoRow", record: TodoRecord) -> None:
        row.title = record.title
        row.description = record.description
        row.completed = bool(record.completed)

    def count(self) -> int:
        with self._lock, self.Session() as session:
            stmt = select(func.count()).select_from(TodoRow)
            return session.execute(stmt).scalar_one()

    def find_all(self) -> list[TodoRecord]:
        with self._lock, self.Session() as session:
            rows = session.execute(select(TodoRow).order_by(TodoRow.id)).scalars()
            return [self._to_record(row) for row in rows]

    def find_by_id(self, todo_id: int) -> Optional[TodoRecord]:
        with self._lock, self.Session() as session:
            row = session.get(TodoRow, todo_id)
            if not row:
                return None
            return self._to_record(row)

    def save(self, record: TodoRecord) -> TodoRecord:
        with self._lock, self.Session() as session:
            row = session.get(TodoRow, record.id) if record.id is not None else None
            if row is None:
                # Unknown ids get a fresh generated id, same as a plain insert.
                row = TodoRow()
                session.add(row)
            self._apply(row, record)
            session.commit()
            session.refresh(row)
            return self._to_record(row)

    def delete_by_id(self, todo_id: int) -> None:
        with self._lock, self.Session() as session:
            session.execute(delete(TodoRow).where(TodoRow.id == todo_id))
            session.commit()

    def execute_statements(self, statements: list[str]) -> None:
        """Run raw SQL statements in a single transaction."""
        with self._lock, self.engine.begin() as conn:
            for statement in statements:
                conn.exec_driver_sql(statement)


Base = declarative_base()


class TodoRow(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=True)
    description = Column(String, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
