from __future__ import annotations

from abc import ABC, abstractmethod

from barbershop.domain.entities.employee import Employee


class EmployeeDirectoryPort(ABC):
    @abstractmethod
    def get_employee(self, employee_id: str) -> Employee:
        """Return the active employee. Raises NotFoundError if absent or inactive."""
        raise NotImplementedError
