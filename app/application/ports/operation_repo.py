"""Port interface for the operation catalogue."""

from abc import ABC, abstractmethod

from app.domain.entities.operation import Operation, OperationGroup


class OperationRepository(ABC):
    @abstractmethod
    async def get_by_id(self, operation_id: str) -> Operation | None:
        ...

    @abstractmethod
    async def get_group(self, group_id: str) -> OperationGroup | None:
        ...

    @abstractmethod
    async def list_groups_for_department(self, department_id: str) -> list[OperationGroup] | None:
        """Groups the department offers, or None when the department is unknown."""
        ...

    @abstractmethod
    async def list_operations(self, group_id: str) -> list[Operation]:
        ...
