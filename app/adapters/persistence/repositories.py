"""SQLAlchemy repository implementations."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import and_, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from app.adapters.persistence.models import (
    AssignmentModel,
    DepartmentModel,
    EmployeeModel,
    OperationGroupModel,
    OperationModel,
    TicketModel,
)
from app.application.ports.assignment_repo import AssignmentRepository
from app.application.ports.employee_repo import EmployeeRepository
from app.application.ports.operation_repo import OperationRepository
from app.application.ports.ticket_repo import TicketRepository
from app.domain.entities.assignment import Assignment
from app.domain.entities.employee import Employee
from app.domain.entities.operation import Operation, OperationGroup
from app.domain.entities.ticket import Ticket
from app.domain.value_objects.day_window import DayWindow
from app.domain.value_objects.enums import AssignmentStatus

logger = logging.getLogger(__name__)

# ─── Mappers ─────────────────────────────────────────────────────────


def _group_to_domain(m: OperationGroupModel) -> OperationGroup:
    return OperationGroup(
        id=m.id,
        name=m.name,
        operation_ids=frozenset(op.id for op in m.operations),
        department_ids=tuple(sorted(d.id for d in m.departments)),
        description=m.description,
    )


def _employee_to_domain(m: EmployeeModel) -> Employee:
    return Employee(
        id=m.id,
        name=m.name,
        department_id=m.department_id,
        on_duty=m.on_duty,
        operation_groups=[_group_to_domain(g) for g in sorted(m.operation_groups, key=lambda g: g.id)],
    )


def _operation_to_domain(m: OperationModel) -> Operation:
    return Operation(
        id=m.id,
        name=m.name,
        operation_group_id=m.operation_group_id,
        description=m.description,
    )


def _assignment_to_domain(m: AssignmentModel) -> Assignment:
    return Assignment(
        id=m.id,
        ticket_id=m.ticket_id,
        employee_id=m.employee_id,
        status=AssignmentStatus(m.status),
        notes=m.notes,
    )


def _ticket_to_domain(m: TicketModel) -> Ticket:
    return Ticket(
        id=m.id,
        operation_id=m.operation_id,
        department_id=m.department_id,
        created_at=m.created_at,
        appointed_time=m.appointed_time,
        assignment=_assignment_to_domain(m.assignment) if m.assignment else None,
    )


def _employee_query():
    return select(EmployeeModel).options(
        selectinload(EmployeeModel.operation_groups).selectinload(OperationGroupModel.operations),
        selectinload(EmployeeModel.operation_groups).selectinload(OperationGroupModel.departments),
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlTicketRepository(TicketRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, ticket: Ticket) -> Ticket:
        m = TicketModel(
            id=ticket.id or uuid.uuid4().hex,
            appointed_time=ticket.appointed_time,
            operation_id=ticket.operation_id,
            department_id=ticket.department_id,
            created_at=ticket.created_at,
        )
        self._s.add(m)
        await self._s.flush()
        ticket.id = m.id
        return ticket

    async def get_by_id(self, ticket_id: str) -> Ticket | None:
        result = await self._s.execute(
            select(TicketModel)
            .options(joinedload(TicketModel.assignment))
            .where(TicketModel.id == ticket_id)
        )
        m = result.unique().scalar_one_or_none()
        return _ticket_to_domain(m) if m else None

    async def get_for_department_today(
        self, department_id: str, window: DayWindow
    ) -> list[Ticket]:
        result = await self._s.execute(
            select(TicketModel)
            .options(joinedload(TicketModel.assignment))
            .where(
                TicketModel.department_id == department_id,
                or_(
                    TicketModel.appointed_time.is_(None),
                    and_(
                        TicketModel.appointed_time >= window.start,
                        TicketModel.appointed_time < window.end,
                    ),
                    and_(
                        TicketModel.created_at >= window.start,
                        TicketModel.created_at < window.end,
                    ),
                ),
            )
            .order_by(TicketModel.created_at, TicketModel.id)
        )
        return [_ticket_to_domain(m) for m in result.unique().scalars()]


class SqlEmployeeRepository(EmployeeRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_by_id(self, employee_id: str) -> Employee | None:
        result = await self._s.execute(
            _employee_query()
            .where(EmployeeModel.id == employee_id)
            .execution_options(populate_existing=True)
        )
        m = result.scalar_one_or_none()
        return _employee_to_domain(m) if m else None

    async def get_on_duty(self, department_id: str) -> list[Employee]:
        result = await self._s.execute(
            _employee_query()
            .where(
                EmployeeModel.department_id == department_id,
                EmployeeModel.on_duty.is_(True),
            )
            .order_by(EmployeeModel.id)
        )
        return [_employee_to_domain(m) for m in result.scalars()]

    async def set_on_duty(self, employee_id: str, on_duty: bool) -> Employee | None:
        await self._s.execute(
            update(EmployeeModel)
            .where(EmployeeModel.id == employee_id)
            .values(on_duty=on_duty)
        )
        await self._s.flush()
        return await self.get_by_id(employee_id)


class SqlOperationRepository(OperationRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_by_id(self, operation_id: str) -> Operation | None:
        m = await self._s.get(OperationModel, operation_id)
        return _operation_to_domain(m) if m else None

    async def get_group(self, group_id: str) -> OperationGroup | None:
        result = await self._s.execute(
            select(OperationGroupModel)
            .options(
                selectinload(OperationGroupModel.operations),
                selectinload(OperationGroupModel.departments),
            )
            .where(OperationGroupModel.id == group_id)
        )
        m = result.scalar_one_or_none()
        return _group_to_domain(m) if m else None

    async def list_groups_for_department(self, department_id: str) -> list[OperationGroup] | None:
        result = await self._s.execute(
            select(DepartmentModel)
            .options(
                selectinload(DepartmentModel.operation_groups).selectinload(OperationGroupModel.operations),
                selectinload(DepartmentModel.operation_groups).selectinload(OperationGroupModel.departments),
            )
            .where(DepartmentModel.id == department_id)
        )
        m = result.scalar_one_or_none()
        if m is None:
            return None
        return [_group_to_domain(g) for g in sorted(m.operation_groups, key=lambda g: g.id)]

    async def list_operations(self, group_id: str) -> list[Operation]:
        result = await self._s.execute(
            select(OperationModel)
            .where(OperationModel.operation_group_id == group_id)
            .order_by(OperationModel.id)
        )
        return [_operation_to_domain(m) for m in result.scalars()]


class SqlAssignmentRepository(AssignmentRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def create_or_get(
        self,
        ticket_id: str,
        employee_id: str,
        status: AssignmentStatus = AssignmentStatus.CALLING,
        notes: str | None = None,
    ) -> Assignment:
        existing = await self.get_by_ticket(ticket_id)
        if existing is not None:
            return existing

        m = AssignmentModel(
            ticket_id=ticket_id,
            employee_id=employee_id,
            status=status.value,
            notes=notes,
        )
        try:
            # SAVEPOINT so a lost race does not poison the outer transaction
            async with self._s.begin_nested():
                self._s.add(m)
        except IntegrityError:
            logger.info("Ticket %s: assignment created concurrently, re-reading", ticket_id)
            existing = await self.get_by_ticket(ticket_id)
            if existing is None:
                raise
            return existing
        return _assignment_to_domain(m)

    async def get_by_ticket(self, ticket_id: str) -> Assignment | None:
        result = await self._s.execute(
            select(AssignmentModel).where(AssignmentModel.ticket_id == ticket_id)
        )
        m = result.scalar_one_or_none()
        return _assignment_to_domain(m) if m else None

    async def get_active(self, employee_ids: list[str]) -> list[Assignment]:
        if not employee_ids:
            return []
        result = await self._s.execute(
            select(AssignmentModel)
            .where(
                AssignmentModel.employee_id.in_(employee_ids),
                AssignmentModel.status == AssignmentStatus.CALLING.value,
            )
            .order_by(AssignmentModel.id)
        )
        return [_assignment_to_domain(m) for m in result.scalars()]

    async def update_status(
        self, ticket_id: str, status: AssignmentStatus, notes: str | None = None
    ) -> Assignment | None:
        values: dict = {"status": status.value}
        if notes is not None:
            values["notes"] = notes
        await self._s.execute(
            update(AssignmentModel)
            .where(AssignmentModel.ticket_id == ticket_id)
            .values(**values)
        )
        await self._s.flush()
        return await self.get_by_ticket(ticket_id)
