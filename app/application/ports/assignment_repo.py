"""Port interface for assignment persistence."""

from abc import ABC, abstractmethod

from app.domain.entities.assignment import Assignment
from app.domain.value_objects.enums import AssignmentStatus


class AssignmentRepository(ABC):
    @abstractmethod
    async def create_or_get(
        self,
        ticket_id: str,
        employee_id: str,
        status: AssignmentStatus = AssignmentStatus.CALLING,
        notes: str | None = None,
    ) -> Assignment:
        """Create the ticket's assignment, or return the one that already exists.

        Idempotent per ticket: a ticket never gets a second record, even when
        two callers race. The returned record may therefore name a different
        employee than requested.
        """
        ...

    @abstractmethod
    async def get_by_ticket(self, ticket_id: str) -> Assignment | None:
        ...

    @abstractmethod
    async def get_active(self, employee_ids: list[str]) -> list[Assignment]:
        """Return CALLING records held by any of *employee_ids*."""
        ...

    @abstractmethod
    async def update_status(
        self, ticket_id: str, status: AssignmentStatus, notes: str | None = None
    ) -> Assignment | None:
        ...
