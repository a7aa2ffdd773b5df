"""Tests for ticket intake: one-shot assignment and ticket creation."""

from __future__ import annotations

import pytest

from app.application.use_cases.assign_ticket import AssignTicketUseCase, CreateTicketUseCase
from app.domain.entities.operation import Operation, OperationGroup
from app.domain.value_objects.enums import AssignmentStatus
from tests.builders import at, make_employee, make_ticket
from tests.fakes import (
    FakeAssignmentRepo,
    FakeEmployeeRepo,
    FakeOperationRepo,
    FakeTicketRepo,
)

OP1 = Operation(id="op1", name="Отправить письменную корреспонденцию", operation_group_id="group1")
OP8 = Operation(id="op8", name="Коммунальные услуги", operation_group_id="group3")
GROUP1 = OperationGroup(
    id="group1", name="Почтовые услуги",
    operation_ids=frozenset({"op1"}), department_ids=("dep1", "dep2"),
)
GROUP3 = OperationGroup(id="group3", name="Платежи", operation_ids=frozenset({"op8"}))


def _make_assign_uc(employees, assignment_repo=None) -> AssignTicketUseCase:
    return AssignTicketUseCase(
        employee_repo=FakeEmployeeRepo(employees),
        assignment_repo=assignment_repo or FakeAssignmentRepo(),
    )


# ─── AssignTicketUseCase ─────────────────────────────────────────────


@pytest.mark.asyncio
async def test_assigns_first_eligible_employee():
    employees = [make_employee("E1", {"op2"}), make_employee("E2", {"op1"})]
    repo = FakeAssignmentRepo()
    ticket = make_ticket("T1", "op1", at(9))

    record = await _make_assign_uc(employees, repo).execute(ticket)

    assert record.employee_id == "E2"
    assert record.status == AssignmentStatus.CALLING
    assert ticket.assignment is record
    assert repo.assignments["T1"] is record


@pytest.mark.asyncio
async def test_no_on_duty_staff_returns_none():
    employees = [make_employee("E1", {"op1"}, on_duty=False)]
    repo = FakeAssignmentRepo()
    record = await _make_assign_uc(employees, repo).execute(make_ticket("T1", "op1", at(9)))
    assert record is None
    assert repo.create_calls == 0


@pytest.mark.asyncio
async def test_no_eligible_staff_returns_none():
    repo = FakeAssignmentRepo()
    record = await _make_assign_uc([make_employee("E1", {"op2"})], repo).execute(
        make_ticket("T1", "op1", at(9))
    )
    assert record is None
    assert repo.assignments == {}


@pytest.mark.asyncio
async def test_staff_of_other_department_not_used():
    employees = [make_employee("E1", {"op1"}, dep="dep2")]
    record = await _make_assign_uc(employees).execute(make_ticket("T1", "op1", at(9)))
    assert record is None


@pytest.mark.asyncio
async def test_assigning_twice_returns_same_record():
    repo = FakeAssignmentRepo()
    uc = _make_assign_uc([make_employee("E1", {"op1"})], repo)
    ticket = make_ticket("T1", "op1", at(9))

    first = await uc.execute(ticket)
    second = await uc.execute(ticket)

    assert first is second
    assert len(repo.assignments) == 1


@pytest.mark.asyncio
async def test_concurrent_assignment_keeps_existing_record():
    """Another flow already bound T1 to E9: the stored record wins."""
    repo = FakeAssignmentRepo()
    await repo.create_or_get("T1", "E9")
    ticket = make_ticket("T1", "op1", at(9))

    record = await _make_assign_uc([make_employee("E1", {"op1"})], repo).execute(ticket)

    assert record.employee_id == "E9"
    assert len(repo.assignments) == 1


# ─── CreateTicketUseCase ─────────────────────────────────────────────


def _make_create_uc(employees, ticket_repo=None, assignment_repo=None) -> CreateTicketUseCase:
    return CreateTicketUseCase(
        ticket_repo=ticket_repo or FakeTicketRepo(),
        operation_repo=FakeOperationRepo([OP1, OP8], [GROUP1, GROUP3]),
        assign_ticket=_make_assign_uc(employees, assignment_repo),
    )


@pytest.mark.asyncio
async def test_create_ticket_in_first_department_and_assign():
    ticket_repo = FakeTicketRepo()
    uc = _make_create_uc([make_employee("E1", {"op1"})], ticket_repo=ticket_repo)

    created = await uc.execute(OP1, appointed_time=at(11), now=at(9))

    assert created.ticket.id in ticket_repo.tickets
    assert created.ticket.department_id == "dep1"
    assert created.ticket.appointed_time == at(11)
    assert created.ticket.created_at == at(9)
    assert created.assignment.employee_id == "E1"


@pytest.mark.asyncio
async def test_create_walk_in_without_staff_leaves_unassigned():
    created = await _make_create_uc([]).execute(OP1, now=at(9))
    assert created.ticket.is_walk_in()
    assert created.assignment is None


@pytest.mark.asyncio
async def test_create_ticket_fails_when_no_department_offers_operation():
    with pytest.raises(ValueError, match="No department offers operation op8"):
        await _make_create_uc([make_employee("E1", {"op8"})]).execute(OP8, now=at(9))
