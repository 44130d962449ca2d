from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..database.connection import DatabaseConnection
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, employee_id, name, email, department"


def _to_employee(row: dict) -> Employee:
    return Employee(
        id=int(row["id"]),
        employee_id=row["employee_id"],
        name=row["name"],
        email=row["email"],
        department=row["department"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with self._conn_factory.cursor() as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY name ASC")
            return [_to_employee(r) for r in cur.fetchall()]

    def list_by_employee_ids(self, employee_ids: Iterable[str]) -> Sequence[Employee]:
        ids = sorted(set(employee_ids))
        if not ids:
            return []
        placeholders = ",".join(["%s"] * len(ids))
        with self._conn_factory.cursor() as cur:
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE employee_id IN ({placeholders}) ORDER BY name ASC",
                tuple(ids),
            )
            return [_to_employee(r) for r in cur.fetchall()]

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        with self._conn_factory.cursor() as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = cur.fetchone()
            return _to_employee(row) if row else None

    def find_by_name(self, name: str) -> Optional[Employee]:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE LOWER(name) LIKE %s
                ORDER BY id ASC
                LIMIT 1
                """,
                (f"%{name.lower()}%",),
            )
            row = cur.fetchone()
            return _to_employee(row) if row else None

    def find_by_employee_id_or_email(self, *, employee_id: str, email: str) -> Optional[Employee]:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s OR email=%s LIMIT 1",
                (employee_id, email),
            )
            row = cur.fetchone()
            return _to_employee(row) if row else None

    def find_by_email_excluding(self, *, email: str, employee_id: str) -> Optional[Employee]:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE email=%s AND employee_id<>%s LIMIT 1",
                (email, employee_id),
            )
            row = cur.fetchone()
            return _to_employee(row) if row else None

    def create(self, *, employee_id: str, name: str, email: str, department: str) -> int:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, email, department)
                VALUES(%s,%s,%s,%s)
                """,
                (employee_id, name, email, department),
            )
            return int(cur.lastrowid)

    def update(self, *, employee_id: str, name: str, email: str, department: str) -> bool:
        with self._conn_factory.cursor() as cur:
            cur.execute(
                """
                UPDATE employees
                SET name=%s, email=%s, department=%s
                WHERE employee_id=%s
                """,
                (name, email, department, employee_id),
            )
            if cur.rowcount > 0:
                return True
            # MySQL reports 0 affected rows when nothing changed.
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.fetchone() is not None

    def delete(self, employee_id: str) -> bool:
        with self._conn_factory.cursor() as cur:
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
