"""Tests for domain enums."""

from app.domain.value_objects.enums import AssignmentStatus


def test_assignment_status_values():
    assert AssignmentStatus.CALLING.value == "CALL"
    assert AssignmentStatus.COMPLETE.value == "COMPLETE"
    assert AssignmentStatus.CANCELLED.value == "CANCELLED"


def test_terminal_statuses():
    assert AssignmentStatus.CALLING.is_terminal is False
    assert AssignmentStatus.COMPLETE.is_terminal is True
    assert AssignmentStatus.CANCELLED.is_terminal is True


def test_status_from_stored_value():
    assert AssignmentStatus("CALL") is AssignmentStatus.CALLING
