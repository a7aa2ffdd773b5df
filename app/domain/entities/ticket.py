"""Ticket entity — a visitor's queued request for one operation."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.entities.assignment import Assignment
from app.domain.value_objects.enums import AssignmentStatus


@dataclass
class Ticket:
    id: str | None
    operation_id: str
    department_id: str
    created_at: datetime
    appointed_time: datetime | None = None
    assignment: Assignment | None = None

    def is_walk_in(self) -> bool:
        return self.appointed_time is None

    @property
    def assignment_status(self) -> AssignmentStatus | None:
        return self.assignment.status if self.assignment else None

    def is_being_served(self) -> bool:
        return self.assignment_status == AssignmentStatus.CALLING

    def is_closed(self) -> bool:
        """True once a staff member completed or cancelled the ticket."""
        status = self.assignment_status
        return status is not None and status.is_terminal
