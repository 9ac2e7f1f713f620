from __future__ import annotations

from collections.abc import Iterable

from barbershop.application.exceptions import NotFoundError
from barbershop.application.ports.client_directory import ClientDirectoryPort
from barbershop.application.ports.employee_directory import EmployeeDirectoryPort
from barbershop.domain.entities.employee import Employee


class MemoryEmployeeDirectory(EmployeeDirectoryPort):
    def __init__(self, employees: Iterable[Employee] | None = None) -> None:
        self._employees: dict[str, Employee] = {e.id: e for e in employees or []}

    def add(self, employee: Employee) -> None:
        self._employees[employee.id] = employee

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get(employee_id)
        if employee is None or not employee.active:
            raise NotFoundError("Employee not found")
        return employee


class MemoryClientDirectory(ClientDirectoryPort):
    def __init__(self, client_ids: Iterable[str] | None = None) -> None:
        self._client_ids: set[str] = set(client_ids or [])

    def add(self, client_id: str) -> None:
        self._client_ids.add(client_id)

    def client_exists(self, client_id: str) -> bool:
        return client_id in self._client_ids
