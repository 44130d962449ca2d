from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import TaskService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    tasks_repo: TaskRepository

    employee_service: EmployeeService
    task_service: TaskService

    conn: Optional[DatabaseConnection] = None


def wire(employees_repo: EmployeeRepository, tasks_repo: TaskRepository, *, conn: Optional[DatabaseConnection] = None) -> Container:
    return Container(
        employees_repo=employees_repo,
        tasks_repo=tasks_repo,
        employee_service=EmployeeService(employees_repo),
        task_service=TaskService(tasks_repo, employees_repo),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(MySQLEmployeeRepository(conn), MySQLTaskRepository(conn), conn=conn)
