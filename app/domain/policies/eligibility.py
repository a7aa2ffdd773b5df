"""EligibilityIndex — which on-duty staff may perform which operation."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.employee import Employee


@dataclass(frozen=True)
class EligibilityIndex:
    """Bipartite staff ↔ operation mapping for one department roster.

    ``employees_by_operation`` keeps roster order, so the first entry is
    always the staff member listed first in the roster.
    """

    roster_order: tuple[str, ...]
    operations_by_employee: dict[str, frozenset[str]]
    employees_by_operation: dict[str, tuple[str, ...]]

    def operations_for(self, employee_id: str) -> frozenset[str]:
        return self.operations_by_employee.get(employee_id, frozenset())

    def employees_for(self, operation_id: str) -> tuple[str, ...]:
        return self.employees_by_operation.get(operation_id, ())

    def can_serve(self, employee_id: str, operation_id: str) -> bool:
        return operation_id in self.operations_for(employee_id)

    @property
    def assignable_operations(self) -> frozenset[str]:
        return frozenset(self.employees_by_operation)


def build_eligibility_index(roster: list[Employee]) -> EligibilityIndex:
    """Pure function: expand staff → operation-groups → operations.

    Staff without groups end up with an empty operation set; operations that
    no roster member's groups contain are simply absent from the index.
    """
    order: list[str] = []
    by_employee: dict[str, frozenset[str]] = {}
    by_operation: dict[str, list[str]] = {}

    for employee in roster:
        if employee.id in by_employee:
            continue
        ops = employee.allowed_operations()
        order.append(employee.id)
        by_employee[employee.id] = ops
        for op_id in sorted(ops):
            by_operation.setdefault(op_id, []).append(employee.id)

    return EligibilityIndex(
        roster_order=tuple(order),
        operations_by_employee=by_employee,
        employees_by_operation={op: tuple(ids) for op, ids in by_operation.items()},
    )
