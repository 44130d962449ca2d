from dataclasses import replace
from datetime import date

from daily_timesheet.accounting.summary import build


def test_zero_task_day_lists_every_employee_zero_filled(employees):
    report = build([], employees, date(2024, 1, 10))

    assert report.day == date(2024, 1, 10)
    assert list(report.employee_summaries) == ["EMP001", "EMP002", "EMP003"]
    for summary in report.employee_summaries.values():
        assert summary.total_hours == 0
        assert summary.remaining_hours == 8
        assert summary.tasks == ()
        assert summary.employee is not None


def test_totals_and_remaining(employees, task_factory):
    tasks = [
        task_factory(1, "EMP001", "2024-01-10T09:00:00", "2024-01-10T13:00:00"),
        task_factory(2, "EMP001", "2024-01-10T13:00:00", "2024-01-10T17:00:00"),
        task_factory(3, "EMP002", "2024-01-10T09:00:00", "2024-01-10T11:15:00"),
        task_factory(4, "EMP002", "2024-01-11T09:00:00", "2024-01-11T11:00:00"),
    ]

    report = build(tasks, employees, date(2024, 1, 10))

    emp1 = report.employee_summaries["EMP001"]
    emp2 = report.employee_summaries["EMP002"]
    assert (emp1.total_hours, emp1.remaining_hours) == (8.0, 0.0)
    assert (emp2.total_hours, emp2.remaining_hours) == (2.25, 5.75)
    assert [t.task_id for t in emp2.tasks] == [3]
    assert report.employee_summaries["EMP003"].tasks == ()


def test_remaining_never_negative(employees, task_factory):
    # Stored data may predate the budget check.
    tasks = [
        task_factory(1, "EMP001", "2024-01-10T06:00:00", "2024-01-10T13:00:00"),
        task_factory(2, "EMP001", "2024-01-10T13:00:00", "2024-01-10T17:00:00"),
    ]

    summary = build(tasks, employees, date(2024, 1, 10)).employee_summaries["EMP001"]

    assert summary.total_hours == 11.0
    assert summary.remaining_hours == 0.0


def test_unknown_employee_tasks_are_kept(employees, task_factory):
    tasks = [task_factory(1, "EMP999", "2024-01-10T09:00:00", "2024-01-10T10:00:00")]

    report = build(tasks, employees, date(2024, 1, 10))

    assert set(report.employee_summaries) == {"EMP001", "EMP002", "EMP003", "EMP999"}
    ghost = report.employee_summaries["EMP999"]
    assert ghost.employee is None
    assert [t.task_id for t in ghost.tasks] == [1]
    assert ghost.total_hours == 1.0


def test_build_is_idempotent(employees, task_factory):
    tasks = [
        task_factory(1, "EMP001", "2024-01-10T09:00:00", "2024-01-10T13:00:00"),
        task_factory(2, "EMP404", "2024-01-10T09:00:00", "2024-01-10T10:00:00"),
    ]

    first = build(tasks, employees, date(2024, 1, 10))
    second = build(tasks, employees, date(2024, 1, 10))

    assert first == second
    assert list(first.employee_summaries) == list(second.employee_summaries)


def test_rebuild_reflects_directory_changes(employees, task_factory):
    tasks = [task_factory(1, "EMP001", "2024-01-10T09:00:00", "2024-01-10T13:00:00")]
    renamed = [replace(employees[0], name="John Q. Doe")] + employees[1:]

    before = build(tasks, employees, date(2024, 1, 10))
    after = build(tasks, renamed, date(2024, 1, 10))

    assert before.employee_summaries["EMP001"].employee.name == "John Doe"
    assert after.employee_summaries["EMP001"].employee.name == "John Q. Doe"
