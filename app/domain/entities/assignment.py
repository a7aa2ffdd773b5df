"""Assignment entity — binds a ticket to the staff member serving it."""

from dataclasses import dataclass

from app.domain.value_objects.enums import AssignmentStatus


@dataclass
class Assignment:
    id: int | None
    ticket_id: str
    employee_id: str
    status: AssignmentStatus = AssignmentStatus.CALLING
    notes: str | None = None

    def is_active(self) -> bool:
        return self.status == AssignmentStatus.CALLING
