"""Employee entity — a branch staff member who serves tickets."""

from dataclasses import dataclass, field

from app.domain.entities.operation import OperationGroup


@dataclass
class Employee:
    id: str
    name: str
    department_id: str
    on_duty: bool = False
    operation_groups: list[OperationGroup] = field(default_factory=list)

    def allowed_operations(self) -> frozenset[str]:
        ops: set[str] = set()
        for group in self.operation_groups:
            ops |= group.operation_ids
        return frozenset(ops)

    def can_handle(self, operation_id: str) -> bool:
        return any(g.includes(operation_id) for g in self.operation_groups)
