"""Port interface for ticket persistence."""

from abc import ABC, abstractmethod

from app.domain.entities.ticket import Ticket
from app.domain.value_objects.day_window import DayWindow


class TicketRepository(ABC):
    @abstractmethod
    async def save(self, ticket: Ticket) -> Ticket:
        ...

    @abstractmethod
    async def get_by_id(self, ticket_id: str) -> Ticket | None:
        ...

    @abstractmethod
    async def get_for_department_today(
        self, department_id: str, window: DayWindow
    ) -> list[Ticket]:
        """Return the department's tickets for the day, oldest first.

        A ticket qualifies if it is a walk-in, is appointed inside *window*,
        or was created inside *window*. Each ticket carries its assignment
        record (if any).
        """
        ...
