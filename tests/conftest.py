from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

import pytest

from daily_timesheet.container import wire
from daily_timesheet.employees.model import Employee
from daily_timesheet.tasks.model import Task


class InMemoryEmployees:
    def __init__(self, employees: Iterable[Employee] = ()):
        self._by_key: dict[str, Employee] = {}
        self._id = 0
        for e in employees:
            self._by_key[e.employee_id] = e
            self._id = max(self._id, e.id)

    def list_all(self):
        return sorted(self._by_key.values(), key=lambda e: e.name)

    def list_by_employee_ids(self, employee_ids):
        wanted = set(employee_ids)
        return [e for e in self.list_all() if e.employee_id in wanted]

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_key.get(employee_id)

    def find_by_name(self, name: str) -> Optional[Employee]:
        matches = [e for e in self._by_key.values() if name.lower() in e.name.lower()]
        return min(matches, key=lambda e: e.id) if matches else None

    def find_by_employee_id_or_email(self, *, employee_id: str, email: str) -> Optional[Employee]:
        return next((e for e in self._by_key.values() if e.employee_id == employee_id or e.email == email), None)

    def find_by_email_excluding(self, *, email: str, employee_id: str) -> Optional[Employee]:
        return next((e for e in self._by_key.values() if e.email == email and e.employee_id != employee_id), None)

    def create(self, *, employee_id: str, name: str, email: str, department: str) -> int:
        self._id += 1
        self._by_key[employee_id] = Employee(
            id=self._id, employee_id=employee_id, name=name, email=email, department=department
        )
        return self._id

    def update(self, *, employee_id: str, name: str, email: str, department: str) -> bool:
        current = self._by_key.get(employee_id)
        if not current:
            return False
        self._by_key[employee_id] = Employee(
            id=current.id, employee_id=employee_id, name=name, email=email, department=department
        )
        return True

    def delete(self, employee_id: str) -> bool:
        return self._by_key.pop(employee_id, None) is not None


class InMemoryTasks:
    def __init__(self, tasks: Iterable[Task] = ()):
        self._by_id: dict[int, Task] = {}
        self._id = 0
        for t in tasks:
            self._by_id[t.task_id] = t
            self._id = max(self._id, t.task_id)

    def _ordered(self, items):
        return sorted(items, key=lambda t: (t.start, t.task_id))

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self._by_id.get(task_id)

    def list_all(self):
        return self._ordered(self._by_id.values())

    def list_for_employee(self, employee_id: str):
        return self._ordered(t for t in self._by_id.values() if t.employee_id == employee_id)

    def list_starting_between(self, *, start: datetime, end: datetime, employee_id: Optional[str] = None):
        return self._ordered(
            t
            for t in self._by_id.values()
            if start <= t.start <= end and (employee_id is None or t.employee_id == employee_id)
        )

    def create(self, *, employee_id: str, description: str, start: datetime, end: datetime) -> int:
        self._id += 1
        self._by_id[self._id] = Task(
            task_id=self._id, employee_id=employee_id, description=description, start=start, end=end
        )
        return self._id

    def update(self, *, task_id: int, employee_id: str, description: str, start: datetime, end: datetime) -> bool:
        if task_id not in self._by_id:
            return False
        self._by_id[task_id] = Task(
            task_id=task_id, employee_id=employee_id, description=description, start=start, end=end
        )
        return True

    def delete(self, task_id: int) -> bool:
        return self._by_id.pop(task_id, None) is not None


def make_task(task_id: int, employee_id: str, start: str, end: str, description: str = "Work") -> Task:
    return Task(
        task_id=task_id,
        employee_id=employee_id,
        description=description,
        start=datetime.fromisoformat(start),
        end=datetime.fromisoformat(end),
    )


@pytest.fixture
def employees():
    return [
        Employee(id=1, employee_id="EMP001", name="John Doe", email="john.doe@company.com", department="Engineering"),
        Employee(id=2, employee_id="EMP002", name="Jane Smith", email="jane.smith@company.com", department="Design"),
        Employee(id=3, employee_id="EMP003", name="Mike Johnson", email="mike.johnson@company.com", department="Marketing"),
    ]


@pytest.fixture
def employees_repo(employees):
    return InMemoryEmployees(employees)


@pytest.fixture
def tasks_repo():
    return InMemoryTasks()


@pytest.fixture
def container(employees_repo, tasks_repo):
    return wire(employees_repo, tasks_repo)


@pytest.fixture
def app(container, monkeypatch):
    from daily_timesheet.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def task_factory():
    return make_task
