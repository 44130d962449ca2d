from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_email, require_non_empty
from ..core.exceptions import DuplicateEmployee, EmployeeNotFound
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_employee_id(employee_id)
        if not employee:
            raise EmployeeNotFound(employee_id)
        return employee

    def find_by_name(self, name: str) -> Employee:
        name = require_non_empty(name, "Name")
        employee = self._employees.find_by_name(name)
        if not employee:
            raise EmployeeNotFound(name)
        return employee

    def create_employee(self, *, employee_id: str, name: str, email: str, department: str) -> Employee:
        employee_id = require_non_empty(employee_id, "Employee ID")
        name = require_non_empty(name, "Name")
        email = require_email(email)
        department = require_non_empty(department, "Department")

        if self._employees.find_by_employee_id_or_email(employee_id=employee_id, email=email):
            raise DuplicateEmployee("Employee with this ID or email already exists")

        new_id = self._employees.create(employee_id=employee_id, name=name, email=email, department=department)
        logger.info("Created employee %s", employee_id)
        return Employee(id=new_id, employee_id=employee_id, name=name, email=email, department=department)

    def update_employee(self, employee_id: str, *, name: str, email: str, department: str) -> Employee:
        """Update directory fields. The business id itself is immutable."""
        name = require_non_empty(name, "Name")
        email = require_email(email)
        department = require_non_empty(department, "Department")

        if self._employees.find_by_email_excluding(email=email, employee_id=employee_id):
            raise DuplicateEmployee("Employee with this email already exists")

        if not self._employees.update(employee_id=employee_id, name=name, email=email, department=department):
            raise EmployeeNotFound(employee_id)

        logger.info("Updated employee %s", employee_id)
        return self.get_employee(employee_id)

    def delete_employee(self, employee_id: str) -> Employee:
        """Remove an employee. Their tasks are kept and report as unknown employee."""
        employee = self.get_employee(employee_id)
        if not self._employees.delete(employee_id):
            raise EmployeeNotFound(employee_id)
        logger.info("Deleted employee %s", employee_id)
        return employee
