from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..accounting import DailyEmployeeSummary, DailySummaryReport, build, same_day_total_hours, validate
from ..common.datetime_utils import day_bounds, truncate_ms
from ..common.validators import require_non_empty
from ..core.exceptions import EmployeeNotFound, TaskNotFound
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import Task, TaskDraft
from .repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskWithEmployee:
    task: Task
    employee: Optional[Employee]


@dataclass(frozen=True)
class EmployeeTasks:
    employee: Employee
    tasks: Sequence[Task]


class TaskService:
    """Use cases around tasks: budget-checked writes and daily reports.

    Every create/update goes through the accounting validator before the
    repository is touched. Validation and write are separate round trips.
    """

    def __init__(self, tasks: TaskRepository, employees: EmployeeRepository):
        self._tasks = tasks
        self._employees = employees

    def _tasks_on_day(self, day: date, *, employee_id: Optional[str] = None) -> Sequence[Task]:
        day_start, day_end = day_bounds(day)
        return self._tasks.list_starting_between(start=day_start, end=day_end, employee_id=employee_id)

    def _check_budget(self, draft: TaskDraft) -> None:
        # The day comes from the draft's (new) start, not from the stored task.
        day = draft.start.date()
        booked = same_day_total_hours(
            self._tasks_on_day(day, employee_id=draft.employee_id),
            employee_id=draft.employee_id,
            day=day,
            exclude_task_id=draft.task_id,
        )
        decision = validate(draft, booked)
        if not decision.accepted:
            logger.info(
                "Rejected task for %s on %s: %s",
                draft.employee_id,
                day.isoformat(),
                decision.reason.value,
                extra={"employee_id": draft.employee_id, "work_date": day},
            )
        decision.raise_for_rejection()

    def list_tasks(self) -> list[TaskWithEmployee]:
        tasks = self._tasks.list_all()
        directory = {e.employee_id: e for e in self._employees.list_by_employee_ids(t.employee_id for t in tasks)}
        return [TaskWithEmployee(task=t, employee=directory.get(t.employee_id)) for t in tasks]

    def get_task(self, task_id: int) -> Task:
        task = self._tasks.get_by_id(task_id)
        if not task:
            raise TaskNotFound(task_id)
        return task

    def create_task(self, draft: TaskDraft) -> Task:
        employee_id = require_non_empty(draft.employee_id, "Employee ID")
        description = require_non_empty(draft.description, "Description")
        draft = TaskDraft(
            employee_id=employee_id,
            description=description,
            start=truncate_ms(draft.start),
            end=truncate_ms(draft.end),
        )

        self._check_budget(draft)

        task_id = self._tasks.create(
            employee_id=draft.employee_id,
            description=draft.description,
            start=draft.start,
            end=draft.end,
        )
        logger.info("Created task %s for %s", task_id, draft.employee_id, extra={"task_id": task_id})
        return Task(
            task_id=task_id,
            employee_id=draft.employee_id,
            description=draft.description,
            start=draft.start,
            end=draft.end,
        )

    def update_task(self, task_id: int, draft: TaskDraft) -> Task:
        self.get_task(task_id)

        employee_id = require_non_empty(draft.employee_id, "Employee ID")
        description = require_non_empty(draft.description, "Description")
        draft = TaskDraft(
            employee_id=employee_id,
            description=description,
            start=truncate_ms(draft.start),
            end=truncate_ms(draft.end),
            task_id=task_id,
        )

        self._check_budget(draft)

        if not self._tasks.update(
            task_id=task_id,
            employee_id=draft.employee_id,
            description=draft.description,
            start=draft.start,
            end=draft.end,
        ):
            raise TaskNotFound(task_id)

        logger.info("Updated task %s", task_id, extra={"task_id": task_id})
        return Task(
            task_id=task_id,
            employee_id=draft.employee_id,
            description=draft.description,
            start=draft.start,
            end=draft.end,
        )

    def delete_task(self, task_id: int) -> Task:
        task = self.get_task(task_id)
        if not self._tasks.delete(task_id):
            raise TaskNotFound(task_id)
        logger.info("Deleted task %s", task_id, extra={"task_id": task_id})
        return task

    def daily_tasks(self, employee_id: str, day: date) -> DailyEmployeeSummary:
        """One known employee's tasks and hours for a day."""
        employee = self._employees.get_by_employee_id(employee_id)
        if not employee:
            raise EmployeeNotFound(employee_id)

        report = build(self._tasks_on_day(day, employee_id=employee_id), [employee], day)
        return report.employee_summaries[employee_id]

    def tasks_by_employee_name(self, name: str) -> EmployeeTasks:
        name = require_non_empty(name, "Name")
        employee = self._employees.find_by_name(name)
        if not employee:
            raise EmployeeNotFound(name)
        return EmployeeTasks(employee=employee, tasks=self._tasks.list_for_employee(employee.employee_id))

    def daily_summary(self, day: date) -> DailySummaryReport:
        """Full report for a day, recomputed from current tasks and the whole directory."""
        return build(self._tasks_on_day(day), self._employees.list_all(), day)
