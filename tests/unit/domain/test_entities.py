"""Tests for domain entities."""

from app.domain.entities.employee import Employee
from app.domain.entities.operation import OperationGroup
from app.domain.value_objects.enums import AssignmentStatus
from tests.builders import at, calling, closed, make_ticket


def test_employee_allowed_operations_union_of_groups():
    e = Employee(
        id="E1", name="Иван", department_id="dep1", on_duty=True,
        operation_groups=[
            OperationGroup(id="group1", name="Почта", operation_ids=frozenset({"op1", "op2"})),
            OperationGroup(id="group3", name="Платежи", operation_ids=frozenset({"op8"})),
        ],
    )
    assert e.allowed_operations() == frozenset({"op1", "op2", "op8"})
    assert e.can_handle("op8") is True
    assert e.can_handle("op5") is False


def test_employee_without_groups_handles_nothing():
    e = Employee(id="E1", name="Иван", department_id="dep1", on_duty=True)
    assert e.allowed_operations() == frozenset()
    assert e.can_handle("op1") is False


def test_ticket_walk_in():
    assert make_ticket("T1", "op1", at(9)).is_walk_in() is True
    assert make_ticket("T2", "op1", at(9), appointed=at(10)).is_walk_in() is False


def test_ticket_assignment_states():
    fresh = make_ticket("T1", "op1", at(9))
    assert fresh.assignment_status is None
    assert fresh.is_being_served() is False
    assert fresh.is_closed() is False

    served = make_ticket("T2", "op1", at(9), assignment=calling("T2", "E1"))
    assert served.assignment_status == AssignmentStatus.CALLING
    assert served.is_being_served() is True
    assert served.is_closed() is False

    done = make_ticket("T3", "op1", at(9), assignment=closed("T3", "E1"))
    assert done.is_closed() is True
    cancelled = make_ticket(
        "T4", "op1", at(9), assignment=closed("T4", "E1", AssignmentStatus.CANCELLED)
    )
    assert cancelled.is_closed() is True


def test_assignment_defaults_to_calling():
    record = calling("T1", "E1")
    assert record.status == AssignmentStatus.CALLING
    assert record.is_active() is True
    assert closed("T1", "E1").is_active() is False
