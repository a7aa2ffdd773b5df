"""Operation and OperationGroup entities — the services a branch offers."""

from dataclasses import dataclass, field


@dataclass
class Operation:
    id: str
    name: str
    operation_group_id: str
    description: str | None = None


@dataclass
class OperationGroup:
    """A category of operations.

    Staff permissions and department offerings are expressed per group,
    never per single operation.
    """

    id: str
    name: str
    operation_ids: frozenset[str] = field(default_factory=frozenset)
    department_ids: tuple[str, ...] = ()
    description: str | None = None

    def includes(self, operation_id: str) -> bool:
        return operation_id in self.operation_ids
