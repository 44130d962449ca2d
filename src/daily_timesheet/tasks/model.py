from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Task:
    """Domain entity: one timed unit of work for one employee."""

    task_id: int
    employee_id: str
    description: str
    start: datetime
    end: datetime


@dataclass(frozen=True)
class TaskDraft:
    """Candidate task values before they are persisted.

    ``task_id`` is set when the draft edits an existing task.
    """

    employee_id: str
    description: str
    start: datetime
    end: datetime
    task_id: Optional[int] = None
