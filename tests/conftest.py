"""Pytest configuration and shared fixtures."""

import pytest

from tests.builders import at, make_employee, make_ticket


@pytest.fixture
def dep1_roster():
    """E1 handles op1; E2 handles op2 and op3."""
    return [make_employee("E1", {"op1"}), make_employee("E2", {"op2", "op3"})]


@pytest.fixture
def dep1_tickets():
    """Base order T1, T2, T3; T3 is appointed for 09:10."""
    return [
        make_ticket("T1", "op1", at(9, 0)),
        make_ticket("T2", "op2", at(9, 5)),
        make_ticket("T3", "op3", at(9, 7), appointed=at(9, 10)),
    ]
