"""Department and Employee entities."""
from __future__ import annotations

import weakref
from typing import List, Optional

from pydantic import Field, PrivateAttr

from pattern_catalog.domain.base.entity import Entity


class Employee(Entity):
    """A hired employee.

    The department link is a weak back-reference: the department owns its
    employees, never the other way round.
    """

    name: str
    age: int

    _department_ref: Optional[weakref.ReferenceType] = PrivateAttr(default=None)

    @property
    def department(self) -> Optional[Department]:
        """Department that hired this employee, if it is still alive."""
        if self._department_ref is None:
            return None
        return self._department_ref()

    def __str__(self) -> str:
        return self.name


class Department(Entity):
    """A named department holding employees in hire order."""

    name: str
    employees: List[Employee] = Field(default_factory=list)

    def enroll(self, employee: Employee) -> Employee:
        """Bind the employee to this department and append it."""
        employee._department_ref = weakref.ref(self)
        self.employees.append(employee)
        return employee

    @property
    def headcount(self) -> int:
        return len(self.employees)

    def __str__(self) -> str:
        return self.name
