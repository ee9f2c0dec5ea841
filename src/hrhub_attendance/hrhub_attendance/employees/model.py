from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee as seen by the attendance reports.

    Note: read-only view over the HR directory, display names are joined in
    by the repository so reports never need a second lookup.
    """

    employee_id: int
    emp_code: str
    name: str
    company_id: int
    department_id: int
    section_id: int
    designation_id: int
    shift_id: Optional[int] = None
    name_bangla: Optional[str] = None
    department_name: str = ""
    section_name: str = ""
    designation_name: str = ""
    shift_name: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class EmployeeFilter:
    """Directory-level filters applied before any attendance is computed."""

    employee_id: Optional[int] = None
    emp_code_contains: Optional[str] = None
    department_id: Optional[int] = None
    section_id: Optional[int] = None
    company_id: Optional[int] = None

