from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.responses import json_errors
from ..core.exceptions import ValidationError
from ..container import Container
from .model import Employee


def employee_to_json(employee: Optional[Employee]) -> Optional[dict]:
    if employee is None:
        return None
    return {
        "id": employee.id,
        "employeeId": employee.employee_id,
        "name": employee.name,
        "email": employee.email,
        "department": employee.department,
    }


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Invalid input data")
    return payload


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @json_errors("Error fetching employees")
    def list_employees():
        return jsonify([employee_to_json(e) for e in container.employee_service.list_employees()])

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @json_errors("Error fetching employee")
    def get_employee(employee_id: str):
        return jsonify(employee_to_json(container.employee_service.get_employee(employee_id)))

    @app.route("/api/employees/by-name/<name>", methods=["GET"], endpoint="get_employee_by_name")
    @json_errors("Error finding employee")
    def get_employee_by_name(name: str):
        return jsonify(employee_to_json(container.employee_service.find_by_name(name)))

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @json_errors("Error creating employee")
    def create_employee():
        payload = _json_body()
        employee = container.employee_service.create_employee(
            employee_id=payload.get("employeeId", ""),
            name=payload.get("name", ""),
            email=payload.get("email", ""),
            department=payload.get("department", ""),
        )
        return jsonify(employee_to_json(employee)), 201

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @json_errors("Error updating employee")
    def update_employee(employee_id: str):
        payload = _json_body()
        employee = container.employee_service.update_employee(
            employee_id,
            name=payload.get("name", ""),
            email=payload.get("email", ""),
            department=payload.get("department", ""),
        )
        return jsonify(employee_to_json(employee))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @json_errors("Error deleting employee")
    def delete_employee(employee_id: str):
        employee = container.employee_service.delete_employee(employee_id)
        return jsonify({"message": "Employee deleted successfully", "employee": employee_to_json(employee)})
