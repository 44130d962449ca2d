from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Task


class TaskRepository(Protocol):
    def get_by_id(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Task]:
        """All tasks ordered by start."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[Task]:
        raise NotImplementedError

    def list_starting_between(
        self,
        *,
        start: datetime,
        end: datetime,
        employee_id: Optional[str] = None,
    ) -> Sequence[Task]:
        """Tasks whose start lies in [start, end], both inclusive, ordered by start."""

        raise NotImplementedError

    def create(self, *, employee_id: str, description: str, start: datetime, end: datetime) -> int:
        raise NotImplementedError

    def update(self, *, task_id: int, employee_id: str, description: str, start: datetime, end: datetime) -> bool:
        raise NotImplementedError

    def delete(self, task_id: int) -> bool:
        raise NotImplementedError
