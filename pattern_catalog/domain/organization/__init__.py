"""Organization directory: departments, employees and the employee factory."""

from .department_aggregate import Department, Employee
from .directory import Directory
from .employee_factory import EmployeeFactory
from .events import DepartmentAddedEvent, EmployeeHiredEvent

__all__ = [
    "Department",
    "Employee",
    "Directory",
    "EmployeeFactory",
    "DepartmentAddedEvent",
    "EmployeeHiredEvent",
]
