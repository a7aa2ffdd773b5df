"""Queue read models — batch assignment view and monitor board."""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo

from app.application.ports.assignment_repo import AssignmentRepository
from app.application.ports.employee_repo import EmployeeRepository
from app.application.ports.ticket_repo import TicketRepository
from app.domain.policies.assignment_engine import assign_backlog
from app.domain.policies.monitor_view import MonitorEntry, build_monitor_view
from app.domain.policies.priority import (
    DEFAULT_PROMOTION_THRESHOLD_MINUTES,
    promote_due_appointment,
)
from app.domain.policies.ticket_ordering import order_by_creation
from app.domain.value_objects.day_window import DayWindow

logger = logging.getLogger(__name__)


class GetActiveTicketsUseCase:
    """Who picks up what next, per on-duty staff member of a department."""

    def __init__(
        self,
        ticket_repo: TicketRepository,
        employee_repo: EmployeeRepository,
        assignment_repo: AssignmentRepository,
        tz: tzinfo = timezone.utc,
        promotion_threshold_minutes: int = DEFAULT_PROMOTION_THRESHOLD_MINUTES,
    ):
        self._tickets = ticket_repo
        self._employees = employee_repo
        self._assignments = assignment_repo
        self._tz = tz
        self._threshold = promotion_threshold_minutes

    async def execute(
        self, department_id: str, now: datetime | None = None
    ) -> dict[str, list[str]]:
        """Compute the department's active tickets per employee.

        Pipeline:
        1. Collect today's tickets (base order: created first)
        2. Promote the earliest appointment if it is due
        3. Load on-duty roster and their CALLING records
        4. Batch-assign one new ticket per idle employee
        """
        now = now or datetime.now(self._tz)
        window = DayWindow.for_instant(now, self._tz)

        tickets = await self._tickets.get_for_department_today(department_id, window)
        if not tickets:
            return {}

        ordered = promote_due_appointment(order_by_creation(tickets), now, self._threshold)

        roster = await self._employees.get_on_duty(department_id)
        if not roster:
            logger.warning(
                "Department %s: no on-duty staff, %d ticket(s) unassigned",
                department_id, len(tickets),
            )
            return {}

        active = await self._assignments.get_active([e.id for e in roster])
        result = assign_backlog(ordered, roster, active)

        logger.info(
            "Department %s: %d ticket(s), %d on duty, %d active",
            department_id, len(tickets), len(roster),
            sum(len(ids) for ids in result.values()),
        )
        return result


class GetMonitorQueueUseCase:
    """Current ticket and visible backlog per on-duty staff member."""

    def __init__(
        self,
        ticket_repo: TicketRepository,
        employee_repo: EmployeeRepository,
        tz: tzinfo = timezone.utc,
    ):
        self._tickets = ticket_repo
        self._employees = employee_repo
        self._tz = tz

    async def execute(
        self, department_id: str, now: datetime | None = None
    ) -> dict[str, MonitorEntry]:
        now = now or datetime.now(self._tz)

        roster = await self._employees.get_on_duty(department_id)
        if not roster:
            logger.warning("Department %s: no on-duty staff for monitor", department_id)
            return {}

        window = DayWindow.for_instant(now, self._tz)
        tickets = await self._tickets.get_for_department_today(department_id, window)
        return build_monitor_view(tickets, roster)
