"""PriorityPolicy — pull an imminent or overdue appointment to the front."""

from __future__ import annotations

import logging
from datetime import datetime

from app.domain.entities.ticket import Ticket

logger = logging.getLogger(__name__)

DEFAULT_PROMOTION_THRESHOLD_MINUTES = 2


def minutes_until(target: datetime, now: datetime) -> int:
    """Whole minutes from *now* to *target*, truncated toward zero."""
    return int((target - now).total_seconds() / 60)


def earliest_appointed(tickets: list[Ticket]) -> Ticket | None:
    """Ticket with the earliest appointed time; ties go to the earlier list position."""
    appointed = [t for t in tickets if t.appointed_time is not None]
    if not appointed:
        return None
    return min(appointed, key=lambda t: t.appointed_time)


def promote_due_appointment(
    tickets: list[Ticket],
    now: datetime,
    threshold_minutes: int = DEFAULT_PROMOTION_THRESHOLD_MINUTES,
) -> list[Ticket]:
    """Return a copy of *tickets* with at most one ticket moved to the front.

    Only the single earliest-appointed ticket is considered. It is promoted
    when its appointment is less than *threshold_minutes* away, which also
    covers appointments that already passed (negative delta). Everything else
    keeps its relative order.
    """
    ordered = list(tickets)
    candidate = earliest_appointed(ordered)
    if candidate is None:
        return ordered

    delta = minutes_until(candidate.appointed_time, now)
    if delta >= threshold_minutes:
        return ordered

    index = next(i for i, t in enumerate(ordered) if t is candidate)
    if index > 0:
        ordered.insert(0, ordered.pop(index))
        logger.info(
            "Ticket %s promoted to front (appointment in %d min)", candidate.id, delta
        )
    return ordered
