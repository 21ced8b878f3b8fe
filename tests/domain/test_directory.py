import threading

import pytest

from pattern_catalog.domain.base.events import EventPublisher
from pattern_catalog.domain.organization import (
    DepartmentAddedEvent,
    Directory,
    EmployeeHiredEvent,
)


def test_add_department_returns_empty_department(directory):
    # Act
    department = directory.add_department("Marketing")

    # Assert
    assert department.name == "Marketing"
    assert department.employees == []
    assert directory.departments == (department,)


def test_add_department_accepts_empty_name(directory):
    department = directory.add_department("")

    assert directory.find_department("") is department


def test_duplicate_department_is_shadowed_by_first(directory):
    # Arrange
    first = directory.add_department("Sales")
    second = directory.add_department("Sales")

    # Act
    found = directory.find_department("Sales")
    john = directory.hire_employee("John", 24, "Sales")

    # Assert
    assert first is not second
    assert first != second
    assert found is first
    assert len(directory) == 2
    assert [e.name for e in first.employees] == ["John"]
    assert second.employees == []
    assert john.department is first
    assert john.department is not second


def test_hire_creates_missing_department(directory):
    # Act
    john = directory.hire_employee("John", 24, "Sales")

    # Assert
    sales = directory.find_department("Sales")
    assert sales is not None
    assert len(directory) == 1
    assert sales.employees == [john]
    assert john.name == "John"
    assert john.age == 24
    assert john.department is sales


def test_second_hire_reuses_department(directory):
    # Arrange
    john = directory.hire_employee("John", 24, "Sales")
    sales = directory.find_department("Sales")

    # Act
    mary = directory.hire_employee("Mary", 21, "Sales")

    # Assert
    assert directory.find_department("Sales") is sales
    assert mary.department is sales
    assert sales.employees == [john, mary]
    assert len(directory) == 1


def test_hire_into_other_department_is_independent(directory):
    # Arrange
    directory.hire_employee("John", 24, "Sales")
    directory.hire_employee("Mary", 21, "Sales")

    # Act
    todd = directory.hire_employee("Todd", 21, "Information Group")

    # Assert
    info = directory.find_department("Information Group")
    sales = directory.find_department("Sales")
    assert info is not sales
    assert info.employees == [todd]
    assert [e.name for e in sales.employees] == ["John", "Mary"]


def test_find_department_miss_returns_none(directory):
    directory.hire_employee("John", 24, "Sales")

    assert directory.find_department("Nonexistent") is None
    assert directory.get("Nonexistent") is None
    assert directory.employees_of("Nonexistent") is None


def test_find_department_is_case_sensitive(directory):
    directory.add_department("Sales")

    assert directory.find_department("sales") is None
    assert directory.find_department("Sales ") is None


def test_employee_order_is_stable_under_lookup(directory):
    names = ["Ann", "Bob", "Cid", "Dee", "Bob"]
    for age, name in enumerate(names, start=20):
        directory.hire_employee(name, age, "Ops")

    for _ in range(3):
        assert [e.name for e in directory.find_department("Ops").employees] == names
    assert [e.name for e in directory.employees_of("Ops")] == names


def test_employees_of_returns_a_copy(directory):
    directory.hire_employee("John", 24, "Sales")

    employees = directory.employees_of("Sales")
    employees.clear()

    assert len(directory.find_department("Sales").employees) == 1


def test_departments_keep_insertion_order(directory):
    directory.hire_employee("John", 24, "Sales")
    directory.hire_employee("Todd", 21, "Information Group")
    directory.add_department("Marketing")

    assert [str(d) for d in directory] == ["Sales", "Information Group", "Marketing"]
    assert "Marketing" in directory
    assert "Legal" not in directory


def test_get_is_an_alias_of_find_department(directory):
    directory.hire_employee("John", 24, "Sales")

    assert directory.get("Sales") is directory.find_department("Sales")


def test_factory_delegates_to_directory(directory, employee_factory, mocker):
    spy = mocker.spy(Directory, "hire_employee")

    john = employee_factory.new("John", 24, "Sales")

    spy.assert_called_once_with(directory, "John", 24, "Sales")
    assert directory.find_department("Sales").employees == [john]


def test_hire_records_domain_events(directory):
    # Act
    directory.add_department("Marketing")
    directory.hire_employee("John", 24, "Sales")
    directory.hire_employee("Mary", 21, "Sales")

    # Assert
    events = directory.get_domain_events()
    assert [type(e) for e in events] == [
        DepartmentAddedEvent,
        EmployeeHiredEvent,
        EmployeeHiredEvent,
    ]
    assert events[0].department_name == "Marketing"
    assert events[1].department_created is True
    assert events[2].department_created is False
    assert all(e.aggregate_id == directory.id for e in events)


def test_publish_events_clears_pending_events(directory):
    # Arrange
    publisher = EventPublisher()
    received = []
    publisher.register("EmployeeHiredEvent", received.append)
    directory.hire_employee("John", 24, "Sales")
    directory.add_department("Marketing")

    # Act
    published = directory.publish_events(publisher)

    # Assert
    assert published == 2
    assert [e.employee_name for e in received] == ["John"]
    assert directory.get_domain_events() == []


def test_concurrent_hires_create_one_department():
    # Arrange
    directory = Directory()
    barrier = threading.Barrier(8)

    def hire(i):
        barrier.wait()
        for j in range(25):
            directory.hire_employee(f"emp-{i}-{j}", 30, "Sales")

    threads = [threading.Thread(target=hire, args=(i,)) for i in range(8)]

    # Act
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    # Assert
    assert len(directory) == 1
    assert len(directory.find_department("Sales").employees) == 200


@pytest.mark.parametrize("age", [0, -1, 200])
def test_age_is_not_range_checked(directory, age):
    employee = directory.hire_employee("Edge", age, "Sales")

    assert employee.age == age


def test_len_waits_for_the_directory_lock(directory):
    # Arrange
    directory.add_department("Sales")
    lengths = []
    reader = threading.Thread(target=lambda: lengths.append(len(directory)))

    # Act
    with directory._lock:
        reader.start()
        reader.join(timeout=0.2)
        blocked = reader.is_alive()
    reader.join()

    # Assert
    assert blocked is True
    assert lengths == [1]
