"""Port interface for employee persistence."""

from abc import ABC, abstractmethod

from app.domain.entities.employee import Employee


class EmployeeRepository(ABC):
    @abstractmethod
    async def get_by_id(self, employee_id: str) -> Employee | None:
        ...

    @abstractmethod
    async def get_on_duty(self, department_id: str) -> list[Employee]:
        """Return on-duty staff of the department in roster order.

        Each employee's operation groups come with their operation ids filled in.
        """
        ...

    @abstractmethod
    async def set_on_duty(self, employee_id: str, on_duty: bool) -> Employee | None:
        ...
