"""Organization directory - departments and the employees they own."""
from __future__ import annotations

import threading
from typing import Any, Iterator, List, Optional, Tuple

from pydantic import PrivateAttr

from pattern_catalog.domain.base.entity import AggregateRoot
from pattern_catalog.domain.base.events import EventPublisher
from pattern_catalog.domain.organization.department_aggregate import Department, Employee
from pattern_catalog.domain.organization.events import DepartmentAddedEvent, EmployeeHiredEvent
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Directory(AggregateRoot):
    """
    Append-only collection of departments.

    Lookup is by exact, case-sensitive name and always returns the first
    (oldest) match. ``add_department`` never checks for an existing name, so
    adding a name twice leaves a second department that lookup cannot reach.
    Hiring into an unknown name creates the department on the spot.

    All mutations hold a re-entrant lock, which makes the lookup-then-append
    sequence of ``hire_employee`` atomic when a directory is shared between
    threads.
    """

    _departments: List[Department] = PrivateAttr(default_factory=list)
    _lock: Any = PrivateAttr(default_factory=threading.RLock)

    def get_id(self) -> str:
        return self.id

    @property
    def departments(self) -> Tuple[Department, ...]:
        """Snapshot of all departments in insertion order."""
        with self._lock:
            return tuple(self._departments)

    def add_department(self, name: str) -> Department:
        """Create a department and append it, even if the name is taken."""
        with self._lock:
            department = Department(name=name)
            self._departments.append(department)
            self.add_domain_event(
                DepartmentAddedEvent(
                    aggregate_id=self.id,
                    aggregate_type="Directory",
                    department_id=department.id,
                    department_name=name,
                )
            )
        logger.debug("Department added", department=name, department_id=department.id)
        return department

    def find_department(self, name: str) -> Optional[Department]:
        """Return the first department called ``name``, or None."""
        with self._lock:
            return next((d for d in self._departments if d.name == name), None)

    # Department.get in the classic example
    get = find_department

    def hire_employee(self, name: str, age: int, department_name: str) -> Employee:
        """Hire into ``department_name``, creating the department if absent."""
        with self._lock:
            department = self.find_department(department_name)
            created = department is None
            if department is None:
                # Appended directly; no DepartmentAddedEvent for implicit creation
                department = Department(name=department_name)
                self._departments.append(department)

            employee = department.enroll(Employee(name=name, age=age))
            self.add_domain_event(
                EmployeeHiredEvent(
                    aggregate_id=self.id,
                    aggregate_type="Directory",
                    employee_id=employee.id,
                    employee_name=name,
                    age=age,
                    department_id=department.id,
                    department_name=department_name,
                    department_created=created,
                )
            )

        logger.debug(
            "Employee hired",
            employee=name,
            department=department_name,
            department_created=created,
        )
        return employee

    def employees_of(self, name: str) -> Optional[List[Employee]]:
        """Copy of the employee list of the first department called ``name``."""
        with self._lock:
            department = self.find_department(name)
            if department is None:
                return None
            return list(department.employees)

    def publish_events(self, publisher: EventPublisher) -> int:
        """Hand pending domain events to ``publisher`` and clear them."""
        with self._lock:
            events = self.get_domain_events()
            self.clear_domain_events()
        publisher.publish_all(events)
        return len(events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._departments)

    def __iter__(self) -> Iterator[Department]:
        return iter(self.departments)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_department(name) is not None
