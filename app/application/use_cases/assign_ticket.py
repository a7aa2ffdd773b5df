"""Ticket intake — create a ticket and give it an initial server."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from app.application.ports.assignment_repo import AssignmentRepository
from app.application.ports.employee_repo import EmployeeRepository
from app.application.ports.operation_repo import OperationRepository
from app.application.ports.ticket_repo import TicketRepository
from app.domain.entities.assignment import Assignment
from app.domain.entities.operation import Operation
from app.domain.entities.ticket import Ticket
from app.domain.policies.assignment_engine import pick_first_eligible
from app.domain.value_objects.enums import AssignmentStatus

logger = logging.getLogger(__name__)


class AssignTicketUseCase:
    """One-shot assignment of a single ticket (first eligible staff member)."""

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        assignment_repo: AssignmentRepository,
    ):
        self._employees = employee_repo
        self._assignments = assignment_repo

    async def execute(self, ticket: Ticket) -> Assignment | None:
        """Pick a server for *ticket* and record a CALLING assignment.

        Returns None when no on-duty staff member may serve the ticket. If the
        ticket was assigned concurrently, the stored record wins and is
        returned unchanged.
        """
        roster = await self._employees.get_on_duty(ticket.department_id)
        if not roster:
            logger.warning(
                "Ticket %s: no on-duty staff in department %s",
                ticket.id, ticket.department_id,
            )
            return None

        employee = pick_first_eligible(ticket, roster)
        if employee is None:
            return None

        record = await self._assignments.create_or_get(
            ticket.id, employee.id, status=AssignmentStatus.CALLING, notes=""
        )
        if record.employee_id != employee.id:
            logger.info(
                "Ticket %s already assigned to %s, keeping existing record",
                ticket.id, record.employee_id,
            )
        else:
            logger.info("Ticket %s → Employee %s", ticket.id, employee.name)

        ticket.assignment = record
        return record


@dataclass
class CreatedTicket:
    ticket: Ticket
    assignment: Assignment | None


class CreateTicketUseCase:
    """Issue a ticket for an operation and run the initial assignment."""

    def __init__(
        self,
        ticket_repo: TicketRepository,
        operation_repo: OperationRepository,
        assign_ticket: AssignTicketUseCase,
    ):
        self._tickets = ticket_repo
        self._operations = operation_repo
        self._assign = assign_ticket

    async def execute(
        self,
        operation: Operation,
        appointed_time: datetime | None = None,
        now: datetime | None = None,
    ) -> CreatedTicket:
        """Create the ticket in the first department offering the operation.

        Raises:
            ValueError: if no department offers the operation's group.
        """
        group = await self._operations.get_group(operation.operation_group_id)
        if group is None or not group.department_ids:
            raise ValueError(f"No department offers operation {operation.id}")

        ticket = Ticket(
            id=None,
            operation_id=operation.id,
            department_id=group.department_ids[0],
            created_at=now or datetime.now(timezone.utc),
            appointed_time=appointed_time,
        )
        ticket = await self._tickets.save(ticket)
        logger.info(
            "Ticket %s created for operation %s in department %s",
            ticket.id, operation.id, ticket.department_id,
        )

        assignment = await self._assign.execute(ticket)
        return CreatedTicket(ticket=ticket, assignment=assignment)
