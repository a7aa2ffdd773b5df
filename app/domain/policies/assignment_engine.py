"""AssignmentEngine — match tickets to on-duty staff.

Two modes:
  * ``pick_first_eligible`` (one-shot): first authorized staff member in
    roster order, no busy check. Used when a fresh ticket needs a server.
  * ``assign_backlog`` (batch): walks the ordered ticket list and gives each
    idle eligible staff member at most one new ticket. Models "who picks up
    next", not a full per-person queue.
"""

from __future__ import annotations

import logging

from app.domain.entities.assignment import Assignment
from app.domain.entities.employee import Employee
from app.domain.entities.ticket import Ticket
from app.domain.policies.eligibility import EligibilityIndex, build_eligibility_index

logger = logging.getLogger(__name__)


def pick_first_eligible(
    ticket: Ticket,
    roster: list[Employee],
    index: EligibilityIndex | None = None,
) -> Employee | None:
    """Mode A: return the first roster member allowed to serve *ticket*.

    Returns None when nobody on the roster handles the ticket's operation.
    """
    index = index or build_eligibility_index(roster)
    for employee in roster:
        if index.can_serve(employee.id, ticket.operation_id):
            return employee
    logger.warning(
        "Ticket %s: no eligible staff for operation %s", ticket.id, ticket.operation_id
    )
    return None


def assign_backlog(
    tickets: list[Ticket],
    roster: list[Employee],
    active_assignments: list[Assignment],
    index: EligibilityIndex | None = None,
) -> dict[str, list[str]]:
    """Mode B: compute each staff member's active ticket list.

    1. Staff holding a CALLING record are busy; their active list starts with
       those ticket ids.
    2. Tickets are visited in list order. A ticket that already carries an
       assignment record is skipped. Otherwise the first idle eligible staff
       member (roster order) takes it and becomes busy.
    3. Tickets nobody could take are left out of the result.

    Every roster member gets an entry, possibly empty. An empty roster or an
    empty ticket list yields ``{}``.
    """
    if not roster:
        logger.warning("No on-duty staff: %d ticket(s) stay unassigned", len(tickets))
        return {}
    if not tickets:
        return {}

    index = index or build_eligibility_index(roster)

    active: dict[str, list[str]] = {emp_id: [] for emp_id in index.roster_order}
    held: set[str] = set()
    for record in active_assignments:
        if not record.is_active() or record.employee_id not in active:
            continue
        if record.ticket_id in held:
            continue
        active[record.employee_id].append(record.ticket_id)
        held.add(record.ticket_id)

    busy: dict[str, bool] = {emp_id: bool(ids) for emp_id, ids in active.items()}

    no_eligible: list[str] = []
    waiting = 0
    for ticket in tickets:
        if ticket.assignment is not None or ticket.id in held:
            continue

        candidates = index.employees_for(ticket.operation_id)
        if not candidates:
            no_eligible.append(ticket.id)
            continue

        chosen = next((emp_id for emp_id in candidates if not busy[emp_id]), None)
        if chosen is None:
            waiting += 1
            continue

        active[chosen].append(ticket.id)
        busy[chosen] = True
        held.add(ticket.id)
        logger.debug("Ticket %s → employee %s", ticket.id, chosen)

    if no_eligible:
        logger.warning(
            "%d ticket(s) match no on-duty staff: %s",
            len(no_eligible), ", ".join(no_eligible),
        )
    if waiting:
        logger.info("%d ticket(s) waiting for an idle staff member", waiting)

    return active
