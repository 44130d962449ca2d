from __future__ import annotations

from datetime import tzinfo
from typing import Optional

from flask import Flask, jsonify, request

from ..accounting import DailyEmployeeSummary
from ..common.datetime_utils import format_instant, parse_iso_date, parse_iso_instant
from ..common.responses import json_errors
from ..core.exceptions import ValidationError
from ..container import Container
from ..employees.controller import employee_to_json
from .model import Task, TaskDraft


def task_to_json(task: Task) -> dict:
    return {
        "id": task.task_id,
        "employeeId": task.employee_id,
        "description": task.description,
        "from": format_instant(task.start),
        "to": format_instant(task.end),
    }


def summary_to_json(summary: DailyEmployeeSummary) -> dict:
    return {
        "totalHours": summary.total_hours,
        "remainingHours": summary.remaining_hours,
        "tasks": [task_to_json(t) for t in summary.tasks],
        "employee": employee_to_json(summary.employee),
    }


def draft_from_json(payload: object, *, tz: Optional[tzinfo] = None) -> TaskDraft:
    """Shape check for ``{employeeId, description, from, to}``; domain rules run in the service."""
    if not isinstance(payload, dict):
        raise ValidationError("Invalid input data")

    employee_id = payload.get("employeeId")
    description = payload.get("description")
    if not isinstance(employee_id, str) or not isinstance(description, str):
        raise ValidationError("Invalid input data")

    return TaskDraft(
        employee_id=employee_id,
        description=description,
        start=parse_iso_instant(payload.get("from"), tz=tz),
        end=parse_iso_instant(payload.get("to"), tz=tz),
    )


def register(app: Flask, container: Container) -> None:
    def _tz() -> Optional[tzinfo]:
        return app.config.get("TIMEZONE_INFO")

    @app.route("/api/tasks", methods=["GET"], endpoint="list_tasks")
    @json_errors("Error fetching tasks")
    def list_tasks():
        rows = container.task_service.list_tasks()
        return jsonify([{**task_to_json(r.task), "employee": employee_to_json(r.employee)} for r in rows])

    @app.route("/api/tasks", methods=["POST"], endpoint="create_task")
    @json_errors("Error creating task")
    def create_task():
        draft = draft_from_json(request.get_json(silent=True), tz=_tz())
        task = container.task_service.create_task(draft)
        return jsonify(task_to_json(task)), 201

    @app.route("/api/tasks/<int:task_id>", methods=["PUT"], endpoint="update_task")
    @json_errors("Error updating task")
    def update_task(task_id: int):
        draft = draft_from_json(request.get_json(silent=True), tz=_tz())
        task = container.task_service.update_task(task_id, draft)
        return jsonify(task_to_json(task))

    @app.route("/api/tasks/<int:task_id>", methods=["DELETE"], endpoint="delete_task")
    @json_errors("Error deleting task")
    def delete_task(task_id: int):
        task = container.task_service.delete_task(task_id)
        return jsonify({"message": "Task deleted successfully", "taskId": task.task_id})

    @app.route("/api/tasks/daily/<employee_id>/<day>", methods=["GET"], endpoint="daily_tasks")
    @json_errors("Error fetching daily tasks")
    def daily_tasks(employee_id: str, day: str):
        summary = container.task_service.daily_tasks(employee_id, parse_iso_date(day))
        return jsonify(summary_to_json(summary))

    @app.route("/api/tasks/employee/<name>", methods=["GET"], endpoint="tasks_by_employee_name")
    @json_errors("Error fetching tasks")
    def tasks_by_employee_name(name: str):
        result = container.task_service.tasks_by_employee_name(name)
        employee = employee_to_json(result.employee)
        return jsonify([{**task_to_json(t), "employee": employee} for t in result.tasks])

    @app.route("/api/tasks/summary/<day>", methods=["GET"], endpoint="daily_summary")
    @json_errors("Error fetching daily summary")
    def daily_summary(day: str):
        report = container.task_service.daily_summary(parse_iso_date(day))
        return jsonify(
            {
                "date": report.day.isoformat(),
                "employeeSummaries": {
                    employee_id: summary_to_json(s) for employee_id, s in report.employee_summaries.items()
                },
            }
        )
