from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import day_bounds, truncate_ms
from ..tasks.model import Task
from .duration import duration_ms, ms_to_hours


@dataclass(frozen=True)
class DailyTotal:
    """One employee's tasks on one day, ordered by start, and their summed length."""

    employee_id: str
    tasks: tuple[Task, ...]
    total_ms: int

    @property
    def total_hours(self) -> float:
        return ms_to_hours(self.total_ms)


def tasks_on_day(tasks: Iterable[Task], day: date) -> list[Task]:
    """Tasks whose start, at millisecond precision, falls within the day, both boundaries inclusive."""
    day_start, day_end = day_bounds(day)
    return [t for t in tasks if day_start <= truncate_ms(t.start) <= day_end]


def aggregate(tasks: Iterable[Task], day: date) -> dict[str, DailyTotal]:
    """Group the day's tasks by employee id and sum their durations."""
    grouped: defaultdict[str, list[Task]] = defaultdict(list)
    for task in tasks_on_day(tasks, day):
        grouped[task.employee_id].append(task)

    out: dict[str, DailyTotal] = {}
    for employee_id in sorted(grouped):
        items = sorted(grouped[employee_id], key=lambda t: (t.start, t.task_id))
        out[employee_id] = DailyTotal(
            employee_id=employee_id,
            tasks=tuple(items),
            total_ms=sum(duration_ms(t.start, t.end) for t in items),
        )
    return out


def same_day_total_hours(
    tasks: Iterable[Task],
    *,
    employee_id: str,
    day: date,
    exclude_task_id: Optional[int] = None,
) -> float:
    """Hours already booked by an employee on a day, leaving out one task (the one being edited)."""
    others = [t for t in tasks if t.employee_id == employee_id and t.task_id != exclude_task_id]
    total = aggregate(others, day).get(employee_id)
    return total.total_hours if total else 0.0
