from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeeFilter
from .repository import EmployeeRepository

_SELECT_EMPLOYEE = """
    SELECT
        e.id, e.emp_id, e.name, e.name_bangla,
        e.company_id, e.department_id, e.section_id, e.designation_id, e.shift_id,
        d.name AS department_name,
        sec.name AS section_name,
        des.name AS designation_name,
        s.name AS shift_name,
        e.is_active
    FROM employees e
    LEFT JOIN departments d ON d.id = e.department_id
    LEFT JOIN sections sec ON sec.id = e.section_id
    LEFT JOIN designations des ON des.id = e.designation_id
    LEFT JOIN shifts s ON s.id = e.shift_id
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["id"]),
        emp_code=r["emp_id"],
        name=r["name"],
        name_bangla=r.get("name_bangla"),
        company_id=int(r["company_id"]),
        department_id=int(r["department_id"]),
        section_id=int(r["section_id"]),
        designation_id=int(r["designation_id"]),
        shift_id=int(r["shift_id"]) if r.get("shift_id") is not None else None,
        department_name=r.get("department_name") or "",
        section_name=r.get("section_name") or "",
        designation_name=r.get("designation_name") or "",
        shift_name=r.get("shift_name"),
        is_active=bool(r.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self, criteria: EmployeeFilter) -> Sequence[Employee]:
        clauses = ["e.is_active = 1"]
        params: list[object] = []

        if criteria.employee_id is not None:
            clauses.append("e.id=%s")
            params.append(int(criteria.employee_id))
        if criteria.emp_code_contains:
            clauses.append("e.emp_id LIKE %s")
            params.append(f"%{criteria.emp_code_contains}%")
        if criteria.department_id is not None:
            clauses.append("e.department_id=%s")
            params.append(int(criteria.department_id))
        if criteria.section_id is not None:
            clauses.append("e.section_id=%s")
            params.append(int(criteria.section_id))
        if criteria.company_id is not None:
            clauses.append("e.company_id=%s")
            params.append(int(criteria.company_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT_EMPLOYEE} WHERE {where} ORDER BY e.id", tuple(params))
            return [_to_employee(r) for r in fetchall(cur)]

    def get_active_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT_EMPLOYEE} WHERE e.id=%s AND e.is_active = 1", (int(employee_id),))
            r = fetchone(cur)
            if not r:
                return None
            return _to_employee(r)
