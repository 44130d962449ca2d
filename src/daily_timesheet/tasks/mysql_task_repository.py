from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from .model import Task
from .repository import TaskRepository

_COLUMNS = "task_id, employee_id, description, start_at, end_at"


def _to_task(row: dict) -> Task:
    return Task(
        task_id=int(row["task_id"]),
        employee_id=row["employee_id"],
        description=row["description"],
        start=row["start_at"],
        end=row["end_at"],
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, task_id: int) -> Optional[Task]:
        with self._conn_factory.cursor() as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM tasks WHERE task_id=%s", (int(task_id),))
            row = cur.fetchone()
            return _to_task(row) if row else None

    def list_all(self) -> Sequence[Task]:
        with self._conn_factory.cursor() as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM tasks ORDER BY start_at ASC, task_id ASC")
            return [_to_task(r) for r in cur.fetchall()]

    def list_for_employee(self, employee_id: str) -> Sequence[Task]:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                f"SELECT {_COLUMNS} FROM tasks WHERE employee_id=%s ORDER BY start_at ASC, task_id ASC",
                (employee_id,),
            )
            return [_to_task(r) for r in cur.fetchall()]

    def list_starting_between(
        self,
        *,
        start: datetime,
        end: datetime,
        employee_id: Optional[str] = None,
    ) -> Sequence[Task]:
        clauses = ["start_at BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)

        with self._conn_factory.cursor() as cur:
            cur.execute(
                f"SELECT {_COLUMNS} FROM tasks WHERE {where} ORDER BY start_at ASC, task_id ASC",
                tuple(params),
            )
            return [_to_task(r) for r in cur.fetchall()]

    def create(self, *, employee_id: str, description: str, start: datetime, end: datetime) -> int:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                INSERT INTO tasks(employee_id, description, start_at, end_at)
                VALUES(%s,%s,%s,%s)
                """,
                (employee_id, description, start, end),
            )
            return int(cur.lastrowid)

    def update(self, *, task_id: int, employee_id: str, description: str, start: datetime, end: datetime) -> bool:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                UPDATE tasks
                SET employee_id=%s, description=%s, start_at=%s, end_at=%s
                WHERE task_id=%s
                """,
                (employee_id, description, start, end, int(task_id)),
            )
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM tasks WHERE task_id=%s", (int(task_id),))
            return cur.fetchone() is not None

    def delete(self, task_id: int) -> bool:
        with self._conn_factory.cursor() as cur:
            cur.execute("DELETE FROM tasks WHERE task_id=%s", (int(task_id),))
            return cur.rowcount > 0
