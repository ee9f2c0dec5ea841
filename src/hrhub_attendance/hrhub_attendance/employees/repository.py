from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeFilter


class EmployeeRepository(Protocol):
    """Read-only employee directory.

    Note (DIP): report services depend on this interface, not on a concrete DB.
    """

    def list_active(self, criteria: EmployeeFilter) -> Sequence[Employee]:
        raise NotImplementedError

    def get_active_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError
