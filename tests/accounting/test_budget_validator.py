from datetime import date, datetime

import pytest

from daily_timesheet.accounting.aggregator import same_day_total_hours
from daily_timesheet.accounting.validator import validate
from daily_timesheet.core.enums import RejectionReason
from daily_timesheet.core.exceptions import ExceedsDailyLimit, ExceedsSingleTaskLimit, InvalidRange
from daily_timesheet.tasks.model import TaskDraft


def _draft(start: str, end: str, *, task_id=None) -> TaskDraft:
    return TaskDraft(
        employee_id="EMP001",
        description="Work",
        start=datetime.fromisoformat(start),
        end=datetime.fromisoformat(end),
        task_id=task_id,
    )


def test_exactly_eight_hours_on_empty_day_is_accepted():
    decision = validate(_draft("2024-01-10T09:00:00", "2024-01-10T17:00:00"), 0.0)

    assert decision.accepted
    assert decision.to_error() is None


def test_any_positive_task_after_full_day_exceeds_with_zero_remaining():
    decision = validate(_draft("2024-01-10T17:00:00", "2024-01-10T17:00:01"), 8.0)

    assert decision.reason == RejectionReason.EXCEEDS_DAILY_LIMIT
    assert decision.remaining_hours == 0.0


def test_four_plus_four_is_accepted():
    assert validate(_draft("2024-01-10T13:00:00", "2024-01-10T17:00:00"), 4.0).accepted


def test_four_plus_five_reports_four_remaining():
    decision = validate(_draft("2024-01-10T13:00:00", "2024-01-10T18:00:00"), 4.0)

    assert decision.reason == RejectionReason.EXCEEDS_DAILY_LIMIT
    assert decision.remaining_hours == 4.0
    with pytest.raises(ExceedsDailyLimit) as exc:
        decision.raise_for_rejection()
    assert exc.value.remaining_hours == 4.0
    assert "Remaining hours: 4.0" in str(exc.value)


def test_edit_excludes_only_itself(task_factory):
    tasks = [
        task_factory(1, "EMP001", "2024-01-10T09:00:00", "2024-01-10T13:00:00"),
        task_factory(2, "EMP001", "2024-01-10T13:00:00", "2024-01-10T17:00:00"),
    ]
    edited = _draft("2024-01-10T09:00:00", "2024-01-10T14:00:00", task_id=1)

    others = same_day_total_hours(tasks, employee_id="EMP001", day=date(2024, 1, 10), exclude_task_id=1)
    decision = validate(edited, others)

    assert others == 4.0
    assert decision.reason == RejectionReason.EXCEEDS_DAILY_LIMIT


@pytest.mark.parametrize(
    "start,end",
    [
        ("2024-01-10T10:00:00", "2024-01-10T10:00:00"),
        ("2024-01-10T10:00:00", "2024-01-10T09:00:00"),
    ],
)
def test_invalid_range_is_rejected(start, end):
    decision = validate(_draft(start, end), 0.0)

    assert decision.reason == RejectionReason.INVALID_RANGE
    with pytest.raises(InvalidRange):
        decision.raise_for_rejection()


def test_invalid_range_wins_over_daily_limit():
    decision = validate(_draft("2024-01-10T10:00:00", "2024-01-10T09:00:00"), 8.0)

    assert decision.reason == RejectionReason.INVALID_RANGE


def test_single_task_limit_wins_over_daily_limit():
    decision = validate(_draft("2024-01-10T08:00:00", "2024-01-10T16:00:00.001"), 6.0)

    assert decision.reason == RejectionReason.EXCEEDS_SINGLE_TASK_LIMIT
    assert decision.remaining_hours is None
    with pytest.raises(ExceedsSingleTaskLimit):
        decision.raise_for_rejection()


def test_float_total_does_not_drift_at_the_boundary():
    # 0.1h x 50 tasks accumulates float error in naive summation.
    booked = sum([0.1] * 50)
    decision = validate(_draft("2024-01-10T12:00:00", "2024-01-10T15:00:00"), booked)

    assert decision.accepted
