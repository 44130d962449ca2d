from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..core.constants import DAILY_LIMIT_MS
from ..employees.model import Employee
from ..tasks.model import Task
from .aggregator import aggregate
from .duration import ms_to_hours


@dataclass(frozen=True)
class DailyEmployeeSummary:
    """Read-model: one employee's day. ``employee`` is None when the id no longer resolves."""

    employee_id: str
    employee: Optional[Employee]
    tasks: tuple[Task, ...]
    total_ms: int

    @property
    def total_hours(self) -> float:
        return ms_to_hours(self.total_ms)

    @property
    def remaining_hours(self) -> float:
        return ms_to_hours(max(0, DAILY_LIMIT_MS - self.total_ms))


@dataclass(frozen=True)
class DailySummaryReport:
    day: date
    employee_summaries: dict[str, DailyEmployeeSummary]


def build(tasks: Iterable[Task], employees: Iterable[Employee], day: date) -> DailySummaryReport:
    """Per-employee report for ``day``.

    Full outer join of the day's aggregation with the employee directory:
    directory employees without tasks get a zero-filled entry, and tasks of
    unknown employee ids are kept under that id with ``employee=None``.
    Directory order comes first, then unknown ids in sorted order.
    """
    totals = aggregate(tasks, day)
    directory = {e.employee_id: e for e in employees}

    summaries: dict[str, DailyEmployeeSummary] = {}
    for employee_id, employee in directory.items():
        total = totals.get(employee_id)
        summaries[employee_id] = DailyEmployeeSummary(
            employee_id=employee_id,
            employee=employee,
            tasks=total.tasks if total else (),
            total_ms=total.total_ms if total else 0,
        )

    for employee_id, total in totals.items():
        if employee_id in summaries:
            continue
        summaries[employee_id] = DailyEmployeeSummary(
            employee_id=employee_id,
            employee=None,
            tasks=total.tasks,
            total_ms=total.total_ms,
        )

    return DailySummaryReport(day=day, employee_summaries=summaries)
