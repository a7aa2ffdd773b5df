"""Staff actions that change what the queue engine reads."""

from __future__ import annotations

import logging

from app.application.ports.assignment_repo import AssignmentRepository
from app.application.ports.employee_repo import EmployeeRepository
from app.domain.entities.assignment import Assignment
from app.domain.entities.employee import Employee
from app.domain.value_objects.enums import AssignmentStatus

logger = logging.getLogger(__name__)


class UpdateAssignmentStatusUseCase:
    """Close a ticket the staff member was serving."""

    def __init__(self, assignment_repo: AssignmentRepository):
        self._assignments = assignment_repo

    async def execute(
        self,
        ticket_id: str,
        status: AssignmentStatus,
        notes: str | None = None,
    ) -> Assignment | None:
        """Move a CALLING record to COMPLETE or CANCELLED.

        Returns None if the ticket has no assignment.

        Raises:
            ValueError: if *status* is not terminal or the record is already closed.
        """
        if not status.is_terminal:
            raise ValueError(f"Cannot move an assignment to {status.value}")

        current = await self._assignments.get_by_ticket(ticket_id)
        if current is None:
            return None
        if not current.is_active():
            raise ValueError(
                f"Ticket {ticket_id} is already {current.status.value}"
            )

        updated = await self._assignments.update_status(ticket_id, status, notes)
        logger.info("Ticket %s: %s by %s", ticket_id, status.value, current.employee_id)
        return updated


class ToggleDutyUseCase:
    def __init__(self, employee_repo: EmployeeRepository):
        self._employees = employee_repo

    async def execute(self, employee_id: str) -> Employee | None:
        employee = await self._employees.get_by_id(employee_id)
        if employee is None:
            return None
        updated = await self._employees.set_on_duty(employee_id, not employee.on_duty)
        if updated is None:
            return None
        logger.info(
            "Employee %s is now %s", employee_id, "on duty" if updated.on_duty else "off duty"
        )
        return updated
