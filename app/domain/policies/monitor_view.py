"""MonitorView — per staff member: ticket being served and visible backlog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.domain.entities.employee import Employee
from app.domain.entities.ticket import Ticket
from app.domain.policies.eligibility import EligibilityIndex, build_eligibility_index
from app.domain.policies.ticket_ordering import order_for_monitor

logger = logging.getLogger(__name__)


@dataclass
class MonitorEntry:
    name: str
    current_ticket: str | None = None
    queue: list[str] = field(default_factory=list)


def build_monitor_view(
    tickets: list[Ticket],
    roster: list[Employee],
    index: EligibilityIndex | None = None,
) -> dict[str, MonitorEntry]:
    """Derive the monitor board from today's tickets.

    *tickets* must already be limited to the department's day window. Closed
    tickets (COMPLETE/CANCELLED) are dropped, the rest are visited in monitor
    order (appointed first, then walk-ins):

      * a CALLING ticket becomes its holder's ``current_ticket``;
      * any other ticket is appended to the ``queue`` of the first eligible
        staff member in roster order.

    Unlike the batch assignment, a staff member accumulates every matching
    ticket in ``queue``.
    """
    index = index or build_eligibility_index(roster)
    view: dict[str, MonitorEntry] = {e.id: MonitorEntry(name=e.name) for e in roster}

    for ticket in order_for_monitor([t for t in tickets if not t.is_closed()]):
        if ticket.is_being_served():
            holder = ticket.assignment.employee_id
            entry = view.get(holder)
            if entry is None:
                continue
            if entry.current_ticket is None:
                entry.current_ticket = ticket.id
            else:
                logger.warning(
                    "Employee %s holds several CALLING tickets (%s kept, %s ignored)",
                    holder, entry.current_ticket, ticket.id,
                )
            continue

        candidates = index.employees_for(ticket.operation_id)
        if not candidates:
            continue
        view[candidates[0]].queue.append(ticket.id)

    return view
