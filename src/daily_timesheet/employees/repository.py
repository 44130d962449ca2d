from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee directory.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by name."""

        raise NotImplementedError

    def list_by_employee_ids(self, employee_ids: Iterable[str]) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_by_name(self, name: str) -> Optional[Employee]:
        """First employee whose name contains ``name``, case-insensitively."""

        raise NotImplementedError

    def find_by_employee_id_or_email(self, *, employee_id: str, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_by_email_excluding(self, *, email: str, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, employee_id: str, name: str, email: str, department: str) -> int:
        raise NotImplementedError

    def update(self, *, employee_id: str, name: str, email: str, department: str) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError
