"""Tests for the assignment engine (one-shot and batch modes)."""

import logging

from app.domain.policies.assignment_engine import assign_backlog, pick_first_eligible
from tests.builders import at, calling, closed, make_employee, make_ticket

# ─── Mode A: pick_first_eligible ─────────────────────────────────────


def test_pick_first_eligible_in_roster_order():
    roster = [
        make_employee("E1", {"op2"}),
        make_employee("E2", {"op1"}),
        make_employee("E3", {"op1"}),
    ]
    chosen = pick_first_eligible(make_ticket("T1", "op1", at(9)), roster)
    assert chosen.id == "E2"


def test_pick_ignores_busy_state():
    """Mode A has no busy check: E1 is picked even while serving someone."""
    roster = [make_employee("E1", {"op1"}), make_employee("E2", {"op1"})]
    first = pick_first_eligible(make_ticket("T1", "op1", at(9)), roster)
    second = pick_first_eligible(make_ticket("T2", "op1", at(9, 1)), roster)
    assert first.id == second.id == "E1"


def test_pick_none_when_nobody_eligible(dep1_roster):
    assert pick_first_eligible(make_ticket("T1", "op9", at(9)), dep1_roster) is None


def test_pick_none_with_empty_roster():
    assert pick_first_eligible(make_ticket("T1", "op1", at(9)), []) is None


def test_pick_skips_staff_without_groups():
    roster = [make_employee("E1", set()), make_employee("E2", {"op1"})]
    assert pick_first_eligible(make_ticket("T1", "op1", at(9)), roster).id == "E2"


# ─── Mode B: assign_backlog ──────────────────────────────────────────


def test_reference_scenario(dep1_roster, dep1_tickets):
    """Ordered [T3, T1, T2]: T3→E2, T1→E1, T2 waits because E2 is busy."""
    t1, t2, t3 = dep1_tickets
    result = assign_backlog([t3, t1, t2], dep1_roster, [])
    assert result == {"E1": ["T1"], "E2": ["T3"]}


def test_empty_roster_returns_empty(dep1_tickets):
    assert assign_backlog(dep1_tickets, [], []) == {}


def test_empty_ticket_list_returns_empty(dep1_roster):
    assert assign_backlog([], dep1_roster, [calling("T9", "E1")]) == {}


def test_busy_employee_keeps_calling_ticket_and_gets_nothing_new(dep1_roster):
    tickets = [make_ticket("T1", "op1", at(9)), make_ticket("T2", "op1", at(9, 5))]
    result = assign_backlog(tickets, dep1_roster, [calling("T0", "E1")])
    assert result == {"E1": ["T0"], "E2": []}


def test_every_calling_record_counts_toward_active_list(dep1_roster):
    tickets = [make_ticket("T1", "op1", at(9))]
    active = [calling("T0", "E1"), calling("T00", "E1")]
    assert assign_backlog(tickets, dep1_roster, active)["E1"] == ["T0", "T00"]


def test_next_idle_eligible_employee_takes_ticket():
    roster = [make_employee("E1", {"op1"}), make_employee("E2", {"op1"})]
    tickets = [make_ticket("T1", "op1", at(9)), make_ticket("T2", "op1", at(9, 1))]
    result = assign_backlog(tickets, roster, [calling("T0", "E1")])
    assert result == {"E1": ["T0"], "E2": ["T1"]}


def test_one_new_ticket_per_employee_per_pass():
    roster = [make_employee("E1", {"op1"})]
    tickets = [make_ticket(f"T{i}", "op1", at(9, i)) for i in range(3)]
    assert assign_backlog(tickets, roster, []) == {"E1": ["T0"]}


def test_ticket_already_calling_is_not_reassigned():
    roster = [make_employee("E1", {"op1"}), make_employee("E2", {"op1"})]
    record = calling("T1", "E1")
    tickets = [make_ticket("T1", "op1", at(9), assignment=record)]
    result = assign_backlog(tickets, roster, [record])
    assert result == {"E1": ["T1"], "E2": []}


def test_ticket_calling_without_joined_record_is_not_reassigned():
    roster = [make_employee("E1", {"op1"}), make_employee("E2", {"op1"})]
    tickets = [make_ticket("T1", "op1", at(9))]
    result = assign_backlog(tickets, roster, [calling("T1", "E1")])
    assert result == {"E1": ["T1"], "E2": []}


def test_closed_ticket_is_skipped(dep1_roster):
    tickets = [
        make_ticket("T1", "op1", at(9), assignment=closed("T1", "E1")),
        make_ticket("T2", "op1", at(9, 5)),
    ]
    assert assign_backlog(tickets, dep1_roster, [])["E1"] == ["T2"]


def test_ineligible_ticket_never_assigned(dep1_roster, caplog):
    tickets = [make_ticket("T1", "op9", at(9))]
    with caplog.at_level(logging.WARNING):
        result = assign_backlog(tickets, dep1_roster, [])
    assert result == {"E1": [], "E2": []}
    assert "T1" in caplog.text


def test_calling_record_of_off_roster_employee_ignored(dep1_roster):
    tickets = [make_ticket("T1", "op1", at(9))]
    result = assign_backlog(tickets, dep1_roster, [calling("T0", "E-offduty")])
    assert result == {"E1": ["T1"], "E2": []}


def test_terminal_records_do_not_make_employee_busy(dep1_roster):
    tickets = [make_ticket("T1", "op1", at(9))]
    result = assign_backlog(tickets, dep1_roster, [closed("T0", "E1")])
    assert result["E1"] == ["T1"]


def test_result_ids_unique_and_within_roster():
    roster = [
        make_employee("E1", {"op1", "op2"}),
        make_employee("E2", {"op2"}),
        make_employee("E3", {"op3"}),
    ]
    tickets = [
        make_ticket("T1", "op2", at(9, 0)),
        make_ticket("T2", "op1", at(9, 1)),
        make_ticket("T3", "op2", at(9, 2)),
        make_ticket("T4", "op3", at(9, 3)),
        make_ticket("T5", "op4", at(9, 4)),
    ]
    result = assign_backlog(tickets, roster, [calling("T1", "E2")])

    assert set(result) == {"E1", "E2", "E3"}
    all_ids = [tid for ids in result.values() for tid in ids]
    assert len(all_ids) == len(set(all_ids))
    assert "T5" not in all_ids
    for emp in roster:
        for tid in result[emp.id]:
            ticket = next((t for t in tickets if t.id == tid), None)
            if ticket is not None and tid != "T1":
                assert emp.can_handle(ticket.operation_id)
    assert result == {"E1": ["T2"], "E2": ["T1"], "E3": ["T4"]}
