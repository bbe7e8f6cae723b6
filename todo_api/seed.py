"""
Loads the static seed script into a freshly created database.
"""

from __future__ import annotations

import logging
from pathlib import Path

from todo_api.db import SqlTodoRepository

logger = logging.getLogger(__name__)


def split_sql_statements(script: str) -> list[str]:
    """
    Split a SQL script on `;`, ignoring semicolons inside quoted literals and
    dropping `--` line comments.
    """
    statements: list[str] = []
    current: list[str] = []
    quote = None
    i = 0
    while i < len(script):
        ch = script[i]
        if quote:
            current.append(ch)
            if ch == quote:
                if script[i + 1 : i + 2] == quote:
                    # Doubled quote is an escaped quote.
                    current.append(quote)
                    i += 1
                else:
                    quote = None
        elif ch in ("'", '"'):
            quote = ch
            current.append(ch)
        elif script.startswith("--", i):
            end = script.find("\n", i)
            if end == -1:
                break
            i = end
            continue
        elif ch == ";":
            statements.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    statements.append("".join(current))
    return [stmt.strip() for stmt in statements if stmt.strip()]


def read_seed_statements(path: Path) -> list[str]:
    return split_sql_statements(Path(path).read_text(encoding="utf-8"))


def apply_seed_script(repository: SqlTodoRepository, path: Path) -> int:
    """
    Run the seed script against an empty todos table.

    Returns the number of statements executed; 0 when the table already holds
    rows, e.g. a file database reopened by a later process.
    """
    existing = repository.count()
    if existing:
        logger.info("Skipping seed script, todos table already has %d rows", existing)
        return 0
    statements = read_seed_statements(path)
    repository.execute_statements(statements)
    logger.info("Applied %d seed statements from %s", len(statements), path)
    return len(statements)
