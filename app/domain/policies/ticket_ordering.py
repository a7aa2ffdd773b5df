"""Ticket collection rules — today's working set and its base orderings."""

from __future__ import annotations

from app.domain.entities.ticket import Ticket
from app.domain.value_objects.day_window import DayWindow


def is_in_day_window(ticket: Ticket, window: DayWindow) -> bool:
    """A ticket belongs to today's business if ANY of these hold:

      1. it has no appointed time (walk-in),
      2. its appointed time falls inside the window,
      3. it was created inside the window.
    """
    if ticket.appointed_time is None:
        return True
    if window.contains(ticket.appointed_time):
        return True
    return window.contains(ticket.created_at)


def order_by_creation(tickets: list[Ticket]) -> list[Ticket]:
    """Base FIFO order: earliest created first. Stable for equal timestamps."""
    return sorted(tickets, key=lambda t: t.created_at)


def collect_for_day(
    tickets: list[Ticket],
    department_id: str,
    window: DayWindow,
) -> list[Ticket]:
    """Filter *tickets* to the department's day window, in base order."""
    return order_by_creation(
        [t for t in tickets if t.department_id == department_id and is_in_day_window(t, window)]
    )


def order_for_monitor(tickets: list[Ticket]) -> list[Ticket]:
    """Appointed tickets first (earliest appointment first), walk-ins after.

    Ties on appointed time, and walk-ins among themselves, fall back to
    creation time.
    """
    return sorted(
        tickets,
        key=lambda t: (
            t.appointed_time is None,
            t.appointed_time or t.created_at,
            t.created_at,
        ),
    )
