from __future__ import annotations

from typing import Optional

from .enums import RejectionReason


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class EmployeeNotFound(NotFoundError):
    def __init__(self, employee_id: str):
        super().__init__("Employee not found")
        self.employee_id = employee_id


class TaskNotFound(NotFoundError):
    def __init__(self, task_id: int):
        super().__init__("Task not found")
        self.task_id = task_id


class DuplicateEmployee(ValidationError):
    """Employee id or email already taken by another employee."""


class BudgetRejection(ValidationError):
    """A candidate task was refused by the daily hours budget."""

    reason: RejectionReason
    remaining_hours: Optional[float] = None


class InvalidRange(BudgetRejection):
    reason = RejectionReason.INVALID_RANGE

    def __init__(self):
        super().__init__("End time must be after start time")


class ExceedsSingleTaskLimit(BudgetRejection):
    reason = RejectionReason.EXCEEDS_SINGLE_TASK_LIMIT

    def __init__(self, limit_hours: int):
        super().__init__(f"Task duration cannot exceed {limit_hours} hours")


class ExceedsDailyLimit(BudgetRejection):
    reason = RejectionReason.EXCEEDS_DAILY_LIMIT

    def __init__(self, limit_hours: int, remaining_hours: float):
        super().__init__(
            f"Adding this task would exceed the daily limit of {limit_hours} hours. "
            f"Remaining hours: {remaining_hours:.1f}"
        )
        self.remaining_hours = remaining_hours
