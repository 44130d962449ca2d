from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: a directory employee.

    ``employee_id`` is the business key tasks refer to; ``id`` is the storage key.
    """

    id: int
    employee_id: str
    name: str
    email: str
    department: str
