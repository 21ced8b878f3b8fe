"""Simple factory for employees."""
from pattern_catalog.domain.organization.department_aggregate import Employee
from pattern_catalog.domain.organization.directory import Directory


class EmployeeFactory:
    """Creates employees inside a directory, placing each in its department."""

    def __init__(self, directory: Directory):
        self.directory = directory

    def new(self, name: str, age: int, department_name: str) -> Employee:
        return self.directory.hire_employee(name, age, department_name)
