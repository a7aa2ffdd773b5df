"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class AssignmentStatus(str, Enum):
    CALLING = "CALL"
    COMPLETE = "COMPLETE"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in (AssignmentStatus.COMPLETE, AssignmentStatus.CANCELLED)
