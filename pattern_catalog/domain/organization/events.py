"""Organization domain events."""
from pattern_catalog.domain.base.events import DomainEvent


class DepartmentAddedEvent(DomainEvent):
    """Raised when a department is added explicitly."""
    department_id: str
    department_name: str


class EmployeeHiredEvent(DomainEvent):
    """Raised when an employee is hired into a department."""
    employee_id: str
    employee_name: str
    age: int
    department_id: str
    department_name: str
    department_created: bool = False
